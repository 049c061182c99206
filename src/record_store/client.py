"""Async client for the hosted record store's REST (PostgREST) interface."""

import logging
from typing import Optional

import httpx

from .protocols import OrderBy, Row

logger = logging.getLogger(__name__)


class RecordStoreError(Exception):
    """Raised when a record store call fails for any reason."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class RecordStoreClient:
    """Async client for table rows stored behind a PostgREST endpoint."""

    REST_PATH = "/rest/v1"

    def __init__(
        self,
        base_url: str,
        api_key: str,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the client for one record store instance.

        Args:
            base_url: Project URL of the record store instance.
            api_key: Access key sent with every request.
            timeout: Request timeout in seconds.
            transport: Optional transport override (used by tests).
        """
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.timeout = timeout
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    @property
    def client(self) -> httpx.AsyncClient:
        """Lazy-load the HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=f"{self.base_url}{self.REST_PATH}",
                headers={
                    "apikey": self.api_key,
                    "Authorization": f"Bearer {self.api_key}",
                    "Content-Type": "application/json",
                },
                timeout=httpx.Timeout(self.timeout),
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "RecordStoreClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def _request(
        self,
        method: str,
        table: str,
        params: Optional[dict] = None,
        json: Optional[object] = None,
        headers: Optional[dict] = None,
    ) -> httpx.Response:
        try:
            response = await self.client.request(
                method, f"/{table}", params=params, json=json, headers=headers
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(
                f"Record store {method} {table} failed: "
                f"{e.response.status_code} {e.response.text[:200]}"
            )
            raise RecordStoreError(
                f"{method} {table} returned {e.response.status_code}",
                status_code=e.response.status_code,
            ) from e
        except httpx.HTTPError as e:
            logger.error(f"Record store {method} {table} failed: {e}")
            raise RecordStoreError(f"{method} {table} failed: {e}") from e
        return response

    async def select(self, table: str, order_by: OrderBy = ()) -> list[Row]:
        """
        Fetch every row of a table.

        Args:
            table: The table name.
            order_by: (field, ascending) pairs applied in order.

        Returns:
            The rows as dictionaries.

        Raises:
            RecordStoreError: If the request fails.
        """
        params = {"select": "*"}
        if order_by:
            params["order"] = ",".join(
                f"{field}.{'asc' if ascending else 'desc'}"
                for field, ascending in order_by
            )
        response = await self._request("GET", table, params=params)
        return response.json()

    async def select_one(self, table: str, row_id: int) -> Optional[Row]:
        """Fetch a single row by id, or None when there is no such row."""
        response = await self._request(
            "GET", table, params={"select": "*", "id": f"eq.{row_id}"}
        )
        rows = response.json()
        return rows[0] if rows else None

    async def insert(self, table: str, row: Row) -> Row:
        """
        Insert a row and return it as stored (with id and timestamps).

        Raises:
            RecordStoreError: If the request fails or nothing is returned.
        """
        response = await self._request(
            "POST",
            table,
            json=[row],
            headers={"Prefer": "return=representation"},
        )
        rows = response.json()
        if not rows:
            raise RecordStoreError(f"POST {table} returned no row")
        return rows[0]

    async def update(self, table: str, row_id: int, fields: Row) -> Optional[Row]:
        """
        Update the given fields of one row.

        Returns:
            The updated row, or None when no row has that id.
        """
        response = await self._request(
            "PATCH",
            table,
            params={"id": f"eq.{row_id}"},
            json=fields,
            headers={"Prefer": "return=representation"},
        )
        rows = response.json()
        return rows[0] if rows else None

    async def delete(self, table: str, row_id: int) -> None:
        """Delete one row. Succeeds whether or not the row existed."""
        await self._request("DELETE", table, params={"id": f"eq.{row_id}"})
