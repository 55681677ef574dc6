"""Test configuration and fixtures"""

from datetime import date, datetime, time, timedelta

import httpx
import pytest
from httpx import ASGITransport, AsyncClient

from app.main import app
from app.database import Database, get_db
from app.dependencies import get_clock, get_table_client
from app.services.store import ReservationStore
from app.services.table_client import TableInfoClient


# Test database URL (use in-memory SQLite for tests)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

TABLE_SERVICE_URL = "http://tables.test"

TABLES = {
    1: {"id": 1, "table_number": "T1", "seating_capacity": 4, "is_active": True},
    2: {"id": 2, "table_number": "T2", "seating_capacity": 2, "is_active": True},
    3: {"id": 3, "table_number": "P1", "seating_capacity": 8, "is_active": False},
}


class TableServiceStub:
    """In-process stand-in for the table service"""

    def __init__(self, tables):
        self.tables = {table_id: dict(table) for table_id, table in tables.items()}
        self.reachable = True
        self.requests = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if not self.reachable:
            raise httpx.ConnectError("Connection refused", request=request)

        table_id = int(request.url.path.rsplit("/", 1)[-1])
        table = self.tables.get(table_id)
        if table is None:
            return httpx.Response(404, json={"error": "Table not found"})
        return httpx.Response(200, json={"table": table})


class FrozenClock:
    """Callable clock pinned to a settable instant"""

    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now


def future_date(days: int = 30) -> date:
    return date.today() + timedelta(days=days)


@pytest.fixture
async def database():
    """Create test database"""
    database = Database(TEST_DATABASE_URL)
    await database.create_all()

    yield database

    await database.drop_all()
    await database.dispose()


@pytest.fixture
async def test_db(database):
    async with database.session_factory() as session:
        yield session


@pytest.fixture
def store(test_db):
    return ReservationStore(test_db)


@pytest.fixture
def table_service():
    return TableServiceStub(TABLES)


@pytest.fixture
async def table_client(table_service):
    client = TableInfoClient(TABLE_SERVICE_URL, transport=httpx.MockTransport(table_service.handler))
    yield client
    await client.aclose()


@pytest.fixture
def clock():
    """Clock pinned to 09:00 today"""
    return FrozenClock(datetime.combine(date.today(), time(9, 0)))


@pytest.fixture
async def client(test_db, table_client, clock):
    """Create test client with overridden database, table service and clock"""
    async def override_get_db():
        yield test_db

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_table_client] = lambda: table_client
    app.dependency_overrides[get_clock] = lambda: clock

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()


@pytest.fixture
def reservation_payload():
    """Valid create request for table 1 (capacity 4)"""
    return {
        "table_id": 1,
        "customer_name": "John Doe",
        "customer_email": "john@example.com",
        "customer_phone": "+1234567890",
        "guest_count": 3,
        "reservation_date": future_date().isoformat(),
        "slot_start_time": "18:00",
        "special_requests": "Window seat",
    }
