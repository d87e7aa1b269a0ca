"""HTTP access to the drivers API for the UI process.

One cached query (the driver list) and the mutations that invalidate it.
Errors are raised to the caller as httpx exceptions; nothing is retried.
"""
from __future__ import annotations

import time
from typing import Any, Dict, List, Mapping, Optional, Tuple

import httpx
import structlog

log = structlog.get_logger(__name__)

DRIVERS_KEY = "drivers"


class QueryCache:
    def __init__(self, ttl_seconds: float = 0.0):
        self.ttl_seconds = ttl_seconds
        self._entries: Dict[str, Tuple[float, Any]] = {}

    def get(self, key: str) -> Optional[Any]:
        hit = self._entries.get(key)
        if hit is None:
            return None
        stored_at, value = hit
        if time.monotonic() - stored_at > self.ttl_seconds:
            self._entries.pop(key, None)
            return None
        return value

    def put(self, key: str, value: Any) -> None:
        self._entries[key] = (time.monotonic(), value)

    def invalidate(self, key: str) -> None:
        self._entries.pop(key, None)


class DriversClient:
    def __init__(self, http: httpx.AsyncClient, cache: QueryCache | None = None):
        self.http = http
        self.cache = cache or QueryCache()

    async def list(self) -> List[Dict[str, Any]]:
        cached = self.cache.get(DRIVERS_KEY)
        if cached is not None:
            return cached
        r = await self.http.get("/drivers")
        r.raise_for_status()
        rows = r.json()
        self.cache.put(DRIVERS_KEY, rows)
        return rows

    async def get(self, driver_id: int) -> Dict[str, Any]:
        r = await self.http.get(f"/drivers/{driver_id}")
        r.raise_for_status()
        return r.json()

    async def create(self, payload: Mapping[str, Any]) -> Dict[str, Any]:
        r = await self.http.post("/drivers", json=dict(payload))
        r.raise_for_status()
        self._invalidate("create")
        return r.json()

    async def update(self, payload: Mapping[str, Any]) -> None:
        r = await self.http.put(f"/drivers/{payload['id']}", json=dict(payload))
        r.raise_for_status()
        self._invalidate("update")

    async def remove(self, driver_id: int) -> None:
        r = await self.http.delete(f"/drivers/{driver_id}")
        r.raise_for_status()
        self._invalidate("remove")

    async def upload_photo(self, driver_id: int, filename: str, data: bytes, content_type: str) -> Dict[str, Any]:
        r = await self.http.put(f"/drivers/{driver_id}/photo", files={"file": (filename, data, content_type)})
        r.raise_for_status()
        self._invalidate("upload_photo")
        return r.json()

    async def upload_cnh_pdf(self, driver_id: int, filename: str, data: bytes) -> Dict[str, Any]:
        r = await self.http.put(
            f"/drivers/{driver_id}/cnh-pdf", files={"file": (filename, data, "application/pdf")}
        )
        r.raise_for_status()
        self._invalidate("upload_cnh_pdf")
        return r.json()

    def _invalidate(self, mutation: str) -> None:
        log.debug("cache.invalidate", key=DRIVERS_KEY, mutation=mutation)
        self.cache.invalidate(DRIVERS_KEY)

    async def aclose(self) -> None:
        await self.http.aclose()
