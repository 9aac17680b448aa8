# -*- coding: utf-8 -*-
"""HTTP client for the digestlog API."""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Union

import httpx

from ..config import settings
from ..logs.models import CreateLogResponse, LogEntry, LogEntryCreate


class LogClient:
    """Thin wrapper over the four `/api` endpoints.

    Pass `http` to reuse an existing `httpx.Client` (e.g. FastAPI's TestClient);
    otherwise a client is created for `base_url` and owned by this object.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        *,
        http: Optional[httpx.Client] = None,
        timeout: float = 10.0,
    ) -> None:
        self._owns_http = http is None
        self._http = http or httpx.Client(
            base_url=(base_url or settings.api_url).rstrip("/"),
            timeout=timeout,
            follow_redirects=True,
        )

    def __enter__(self) -> "LogClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_http:
            self._http.close()

    def health(self) -> Dict[str, Any]:
        resp = self._http.get("/api/health")
        resp.raise_for_status()
        return resp.json()

    def fetch_logs(self) -> List[LogEntry]:
        resp = self._http.get("/api/logs")
        resp.raise_for_status()
        return [LogEntry.model_validate(item) for item in resp.json()]

    def add_log(self, entry: Union[LogEntryCreate, Mapping[str, Any]]) -> int:
        if isinstance(entry, LogEntryCreate):
            payload = entry.model_dump()
        else:
            payload = dict(entry)
        resp = self._http.post("/api/logs", json=payload)
        resp.raise_for_status()
        return CreateLogResponse.model_validate(resp.json()).id

    def delete_log(self, log_id: int) -> None:
        resp = self._http.delete(f"/api/logs/{int(log_id)}")
        resp.raise_for_status()
