from datetime import datetime
from typing import Annotated, Literal

from pydantic import BaseModel, Field


class ObjectMetadata(BaseModel):
    content_length: int | None = None
    content_type: str | None = None
    etag: str | None = None
    last_modified: datetime | None = None


class Found(BaseModel):
    kind: Literal["found"] = "found"
    key: str
    metadata: ObjectMetadata = Field(default_factory=ObjectMetadata)


class NotFound(BaseModel):
    kind: Literal["not_found"] = "not_found"
    key: str


class Failure(BaseModel):
    """Lookup error; ``detail`` is for server-side logs only."""

    kind: Literal["failure"] = "failure"
    key: str
    detail: str


LookupResult = Annotated[Found | NotFound | Failure, Field(discriminator="kind")]
