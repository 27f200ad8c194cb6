from datetime import datetime, timezone
from uuid import uuid4

from pydantic import BaseModel, Field, field_validator


class Comment(BaseModel):
    comment_id: str = Field(default_factory=lambda: uuid4().hex)
    content: str = Field(default="")
    author: str = Field(default="")
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    metadata: dict = Field(default_factory=dict)

    @field_validator("created_at")
    @classmethod
    def _to_utc(cls, value: datetime) -> datetime:
        # naive timestamps are taken as UTC so every created_at is comparable
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)
