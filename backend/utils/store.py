# backend/utils/store.py
"""Read-only access to the remote product database.

Two backends share one async interface: a SQLAlchemy one for a directly
reachable Postgres/SQLite database and a REST one for the hosted data API
(PostgREST, as exposed by Supabase).
"""
import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

import httpx
from fastapi.concurrency import run_in_threadpool
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError

from config import Settings

logger = logging.getLogger(__name__)

Row = Dict[str, Any]


class FetchError(Exception):
    """The store could not return rows for a table."""

    def __init__(self, message: str, table: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.table = table


class DataStore(ABC):
    @abstractmethod
    async def fetch_all(self, table: str) -> List[Row]:
        ...

    @abstractmethod
    async def fetch_filtered(
        self, table: str, column: str, value: Any, order_by: str, descending: bool = True
    ) -> List[Row]:
        ...


class SqlStore(DataStore):
    def __init__(self, session_factory, metadata=None):
        if metadata is None:
            from database import Base
            import models.product  # noqa: F401
            import models.stock  # noqa: F401
            metadata = Base.metadata
        self.session_factory = session_factory
        self.metadata = metadata

    def _table(self, name: str):
        table = self.metadata.tables.get(name)
        if table is None:
            raise FetchError(f"Unknown table '{name}'", table=name)
        return table

    @staticmethod
    def _column(table, name: str):
        # Look up by database column name, not by ORM attribute key
        for col in table.columns:
            if col.name == name:
                return col
        raise FetchError(f"Unknown column '{name}' on '{table.name}'", table=table.name)

    def _run(self, table, stmt) -> List[Row]:
        db = self.session_factory()
        try:
            result = db.execute(stmt)
            return [{col.name: row._mapping[col] for col in table.columns} for row in result]
        except SQLAlchemyError as e:
            logger.error(f"Store query failed on {table.name}: {e}")
            raise FetchError(f"Query failed on '{table.name}'", table=table.name) from e
        finally:
            db.close()

    def _fetch_all_sync(self, table_name: str) -> List[Row]:
        table = self._table(table_name)
        return self._run(table, select(table))

    def _fetch_filtered_sync(self, table_name, column, value, order_by, descending) -> List[Row]:
        table = self._table(table_name)
        order_col = self._column(table, order_by)
        stmt = (
            select(table)
            .where(self._column(table, column) == value)
            .order_by(order_col.desc() if descending else order_col.asc())
        )
        return self._run(table, stmt)

    async def fetch_all(self, table: str) -> List[Row]:
        return await run_in_threadpool(self._fetch_all_sync, table)

    async def fetch_filtered(self, table, column, value, order_by, descending=True) -> List[Row]:
        return await run_in_threadpool(self._fetch_filtered_sync, table, column, value, order_by, descending)


class RestStore(DataStore):
    def __init__(self, base_url: str, api_key: Optional[str] = None, timeout: float = 10.0, transport=None):
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.timeout = timeout
        self.transport = transport

    def _headers(self) -> Dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.api_key:
            headers["apikey"] = self.api_key
            headers["Authorization"] = f"Bearer {self.api_key}"
        return headers

    async def _get(self, table: str, params: Dict[str, str]) -> List[Row]:
        url = f"{self.base_url}/rest/v1/{table}"
        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            try:
                response = await client.get(url, params=params, headers=self._headers())
                response.raise_for_status()
                data = response.json()
            except (httpx.RequestError, httpx.HTTPStatusError) as e:
                logger.error(f"Data API error on {table}: {e}")
                raise FetchError(f"Request failed for '{table}'", table=table) from e
            except ValueError as e:
                logger.error(f"Data API returned invalid JSON for {table}: {e}")
                raise FetchError(f"Invalid response for '{table}'", table=table) from e
        if data is None:
            return []
        if not isinstance(data, list):
            raise FetchError(f"Unexpected payload for '{table}'", table=table)
        return data

    async def fetch_all(self, table: str) -> List[Row]:
        return await self._get(table, {"select": "*"})

    async def fetch_filtered(self, table, column, value, order_by, descending=True) -> List[Row]:
        params = {
            "select": "*",
            column: f"eq.{value}",
            "order": f"{order_by}.{'desc' if descending else 'asc'}",
        }
        return await self._get(table, params)


def build_store(settings: Settings) -> DataStore:
    if settings.STORE_BACKEND == "rest":
        if not settings.SUPABASE_URL:
            raise ValueError("SUPABASE_URL is required for the rest store")
        return RestStore(settings.SUPABASE_URL, settings.SUPABASE_KEY, timeout=settings.REQUEST_TIMEOUT)
    from database import SessionLocal
    return SqlStore(SessionLocal)
