# libs/http/client.py
from __future__ import annotations
import datetime as dt
import json, logging, uuid
from typing import Any, Dict
import httpx

logger = logging.getLogger(__name__)

# Header constants
CID_HEADER = "X-Correlation-Id"
NO_CACHE = "no-store"

UNKNOWN_ERROR = "Unknown error"
INVALID_RESPONSE = "Invalid response"


def _gen_cid() -> str:
    """Random correlation id when the caller did not supply one."""
    return str(uuid.uuid4())


def _json_default(o: Any) -> Any:
    if isinstance(o, (dt.date, dt.datetime)):
        return o.isoformat()
    raise TypeError(f"Object of type {type(o).__name__} is not JSON serializable")


def failure(message: str) -> Dict[str, Any]:
    return {"success": False, "message": message}


class RemoteCallClient:
    """
    Single-endpoint JSON client.
    - POST only, one round trip per call
    - Auto JSON encode/decode
    - Caching disabled (Cache-Control: no-store)
    - Propagate X-Correlation-Id
    - Never raises: every failure comes back as {"success": False, "message": ...}
    """

    def __init__(self, url: str, *, client: httpx.AsyncClient | None = None):
        self.url = url
        self._owns_client = client is None
        self.s = client or httpx.AsyncClient()

    async def call(self,
                   payload: Dict[str, Any],
                   *,
                   correlation_id: str | None = None) -> Dict[str, Any]:
        cid = correlation_id or _gen_cid()
        action = payload.get("action")
        hdrs = {
            "Content-Type": "application/json",
            "Cache-Control": NO_CACHE,
            CID_HEADER: cid,
        }

        try:
            data = json.dumps(payload, default=_json_default)
        except (TypeError, ValueError) as exc:
            logger.warning("Cannot encode payload action=%s cid=%s: %s", action, cid, exc)
            return failure(str(exc) or UNKNOWN_ERROR)

        logger.debug("POST %s action=%s cid=%s", self.url, action, cid)
        try:
            # Redirects are followed like browser fetch does (Apps Script answers with a 302).
            resp = await self.s.post(self.url, content=data, headers=hdrs, follow_redirects=True)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            logger.warning("Request failed action=%s cid=%s: %r", action, cid, exc)
            return failure(str(exc) or UNKNOWN_ERROR)

        # Status failures are reported without touching the body
        if not resp.is_success:
            logger.warning("Remote answered %s action=%s cid=%s", resp.status_code, action, cid)
            return failure(f"Network error: {resp.status_code} {resp.reason_phrase}")

        try:
            body = resp.json()
        except ValueError:
            logger.warning("Non-JSON body action=%s cid=%s", action, cid)
            return failure(INVALID_RESPONSE)

        if not isinstance(body, dict):
            logger.warning("Body is not an object action=%s cid=%s", action, cid)
            return failure(INVALID_RESPONSE)
        return body

    async def aclose(self) -> None:
        if self._owns_client:
            await self.s.aclose()

    async def __aenter__(self) -> "RemoteCallClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()
