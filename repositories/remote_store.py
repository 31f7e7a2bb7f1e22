"""repositories/remote_store.py
---------------------------------
Pure data access: read and replace JSON documents on the vocab server.

No business rules live here. The store only knows how to ``GET`` and ``PUT``
a path; interpreting status codes (404-as-empty etc.) is the job of the
service layer.
"""
from __future__ import annotations

import asyncio
import json
import logging
import urllib.error
import urllib.request
from dataclasses import dataclass
from typing import Any

from config import DEFAULT_SERVER_URL, REQUEST_TIMEOUT

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Response:
    status: int
    body: bytes = b""

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300

    def json(self) -> Any:
        return json.loads(self.body.decode("utf-8"))


class RemoteStore:
    """Async wrapper around blocking ``urllib`` calls.

    Every request runs in the event loop's default executor so the caller's
    loop keeps spinning. HTTP error statuses come back as a :class:`Response`;
    only transport problems (refused connection, timeout) raise ``OSError``.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_SERVER_URL,
        *,
        timeout: float = REQUEST_TIMEOUT,
        opener: urllib.request.OpenerDirector | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = float(timeout)
        self._opener = opener or urllib.request.build_opener()

    def url_for(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    # -------- Read --------
    async def get(self, path: str) -> Response:
        req = urllib.request.Request(
            self.url_for(path),
            headers={"Accept": "application/json", "User-Agent": "Vocab"},
        )
        return await self._send(req)

    # -------- Full replace --------
    async def put(self, path: str, payload: Any) -> Response:
        body = json.dumps(payload, ensure_ascii=False).encode("utf-8")
        req = urllib.request.Request(
            self.url_for(path),
            data=body,
            method="PUT",
            headers={"Content-Type": "application/json; charset=utf-8", "User-Agent": "Vocab"},
        )
        return await self._send(req)

    async def _send(self, req: urllib.request.Request) -> Response:
        loop = asyncio.get_running_loop()
        logger.debug("%s %s", req.get_method(), req.full_url)
        resp = await loop.run_in_executor(None, self._open, req)
        logger.debug("%s %s -> %s", req.get_method(), req.full_url, resp.status)
        return resp

    def _open(self, req: urllib.request.Request) -> Response:
        try:
            with self._opener.open(req, timeout=self.timeout) as r:
                return Response(status=r.status, body=r.read())
        except urllib.error.HTTPError as e:
            # non-2xx statuses are answers, not transport failures
            try:
                body = e.read()
            except OSError:
                body = b""
            return Response(status=e.code, body=body)


__all__ = ["RemoteStore", "Response"]
