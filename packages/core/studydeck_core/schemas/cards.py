"""Card and content block schemas.

Field names follow the viewer's camelCase keys when serialized with
``by_alias=True``; Python code uses the snake_case attribute names.
"""

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class CodeType(str, Enum):
    """Polarity of a code sample, taken from the marker above its fence."""

    GOOD = "good"
    BAD = "bad"
    NEUTRAL = "neutral"


class TextBlock(BaseModel):
    """A cleaned prose paragraph."""

    type: Literal["text"] = "text"
    content: str = Field(..., description="Paragraph text with markup removed")


class ListBlock(BaseModel):
    """A bullet or numbered list."""

    type: Literal["list"] = "list"
    items: list[str] = Field(default_factory=list, description="Cleaned item texts")


class TableBlock(BaseModel):
    """A pipe table with a header row and at least one data row."""

    type: Literal["table"] = "table"
    headers: list[str] = Field(default_factory=list, description="Header cells")
    rows: list[list[str]] = Field(default_factory=list, description="Data rows")


class CodeBlock(BaseModel):
    """Verbatim lines from a fenced code region."""

    model_config = ConfigDict(populate_by_name=True)

    type: Literal["code"] = "code"
    language: str = Field(..., description="Fence language tag")
    code: str = Field(..., description="Lines between the fences, newline-joined")
    code_type: CodeType = Field(
        CodeType.NEUTRAL, alias="codeType", description="Good/bad example marker"
    )


ContentBlock = Annotated[
    Union[TextBlock, ListBlock, TableBlock, CodeBlock],
    Field(discriminator="type"),
]


class Card(BaseModel):
    """One question with its ordered answer blocks."""

    model_config = ConfigDict(populate_by_name=True)

    question: str = Field(..., min_length=1, description="Prompt text")
    answer: list[ContentBlock] = Field(
        default_factory=list, description="Ordered answer blocks"
    )
    category: str = Field(..., description="Coarse grouping")
    topic: str = Field(..., description="Human-readable topic label")
    topic_id: str = Field(..., alias="topicId", description="Normalized topic key")
    source: str = Field(..., description="Forward-slash relative source path")
    id: str | None = Field(None, description="Dataset identifier (card-<n>)")
    is_index: bool | None = Field(None, alias="isIndex")
    is_section: bool | None = Field(None, alias="isSection")
    is_concept: bool | None = Field(None, alias="isConcept")

    def to_data(self) -> dict:
        """Plain-data form used by the dataset asset."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
