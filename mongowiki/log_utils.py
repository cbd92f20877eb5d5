import json
import logging
import time
import uuid

from starlette.requests import Request
from starlette.responses import Response

LOGGER_NAME = "mongowiki"


def setup_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )


async def inject_request_id(request: Request, call_next):
    """Tag the request with ``X-Request-Id`` and write one JSON access line for it."""
    req_id = request.headers.get("X-Request-Id") or str(uuid.uuid4())
    request.state.req_id = req_id
    started = time.perf_counter()
    response: Response = await call_next(request)
    response.headers["X-Request-Id"] = req_id
    logging.getLogger(LOGGER_NAME).info(json.dumps({
        "msg": "request",
        "req_id": req_id,
        "method": request.method,
        "path": request.url.path,
        "status": response.status_code,
        "duration_ms": round((time.perf_counter() - started) * 1000, 2),
    }))
    return response
