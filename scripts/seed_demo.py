#!/usr/bin/env python3
"""
Seed script to create demo reservations
"""

import asyncio
from datetime import date, timedelta


DEMO_GUESTS = [
    # (table_id, name, email, phone, guests, days ahead, start, request)
    (1, "John Doe", "john@example.com", "+1234567890", 3, 1, "18:00", "Window seat please"),
    (1, "Ana Lopez", "ana@example.com", "+1234567891", 2, 1, "20:00", None),
    (2, "Kenji Sato", "kenji@example.com", "+1234567892", 4, 2, "12:00", "Birthday cake at dessert"),
    (3, "Priya Nair", "priya@example.com", "+1234567893", 6, 3, "19:30", None),
]


async def seed_demo_data():
    """Seed demo data for development"""
    from sqlalchemy import select, func

    from app.config import settings
    from app.database import Database
    from app.models.reservation import Reservation, ReservationStatus
    from app.services.slots import compute_end_time, parse_slot_time

    database = Database(settings.database_url)

    # Create tables
    await database.create_all()

    async with database.session_factory() as db:
        # Check if reservations already exist
        result = await db.execute(select(func.count(Reservation.id)))
        if result.scalar():
            print("Reservations already exist. Skipping...")
            await database.dispose()
            return

        print("Creating demo reservations...")

        today = date.today()
        for table_id, name, email, phone, guests, days_ahead, start, request in DEMO_GUESTS:
            start_time = parse_slot_time(start)
            db.add(Reservation(
                table_id=table_id,
                customer_name=name,
                customer_email=email,
                customer_phone=phone,
                guest_count=guests,
                reservation_date=today + timedelta(days=days_ahead),
                slot_start_time=start_time,
                slot_end_time=compute_end_time(start_time),
                status=ReservationStatus.CONFIRMED,
                special_requests=request,
            ))

        await db.commit()

    await database.dispose()

    print(f"""
Demo data created successfully!

Reservations: {len(DEMO_GUESTS)} created across tables 1-3,
starting {today + timedelta(days=1)}.
""")


if __name__ == "__main__":
    asyncio.run(seed_demo_data())
