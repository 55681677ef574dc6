"""Client for the table service that owns table capacity and status"""

from typing import Optional
import httpx
import pydantic
import structlog

from app.schemas.reservation import TableInfo

logger = structlog.get_logger()


class TableInfoClient:
    """
    Looks up a single table from the table service.

    One request per lookup with no retry. Any failure, whether a transport
    error, a non-2xx status or an unexpected payload, yields None.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 5.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout,
            transport=transport,
        )

    async def get_table(self, table_id: int) -> Optional[TableInfo]:
        """Fetch table details, or None when the table can't be resolved"""
        try:
            response = await self._client.get(f"/api/tables/{table_id}")
        except httpx.HTTPError as exc:
            logger.warning(
                "Table service unreachable",
                table_id=table_id,
                base_url=self.base_url,
                error=str(exc),
            )
            return None

        if not response.is_success:
            logger.warning(
                "Table lookup failed",
                table_id=table_id,
                status_code=response.status_code,
            )
            return None

        try:
            payload = response.json()
            return TableInfo.model_validate(payload["table"])
        except (ValueError, KeyError, TypeError, pydantic.ValidationError) as exc:
            logger.warning("Malformed table service response", table_id=table_id, error=str(exc))
            return None

    async def aclose(self) -> None:
        await self._client.aclose()
