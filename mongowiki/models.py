from pydantic import BaseModel, Field


class Page(BaseModel):
    title: str = Field(..., pattern=r"^[a-zA-Z0-9]+$", description="Unique alphanumeric page key")
    body: bytes = b""

    @property
    def text(self) -> str:
        return self.body.decode("utf-8", errors="replace")

    def to_document(self) -> dict:
        return {"title": self.title, "body": self.body}


class HealthResponse(BaseModel):
    ok: bool


class ReadyResponse(BaseModel):
    ready: bool
    reason: str | None = None
