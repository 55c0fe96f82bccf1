"""Topic schemas."""

from pydantic import BaseModel, Field

from studydeck_core.schemas.cards import Card


class TopicInfo(BaseModel):
    """Source path and topic naming derived from a file path."""

    source_file: str = Field(..., description="Relative path with forward slashes")
    topic_id: str = Field(..., description="Normalized topic key")
    topic_label: str = Field(..., description="Title-cased topic label")


class TopicGroup(BaseModel):
    """Cards sharing a topic key, in dataset order."""

    label: str
    cards: list[Card] = Field(default_factory=list)
