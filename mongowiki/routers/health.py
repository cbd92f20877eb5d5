from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from mongowiki.core.errors import StorageError
from mongowiki.deps import get_store
from mongowiki.models import HealthResponse, ReadyResponse
from mongowiki.page_store import PageStore

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(ok=True)


@router.get(
    "/ready",
    response_model=ReadyResponse,
    responses={503: {"model": ReadyResponse, "description": "MongoDB not reachable"}},
)
def ready(store: PageStore = Depends(get_store)):
    try:
        store.ping()
    except StorageError as e:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content=ReadyResponse(ready=False, reason=e.message).model_dump(),
        )
    return ReadyResponse(ready=True)
