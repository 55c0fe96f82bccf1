"""Source document schemas."""

from pydantic import BaseModel, Field


class SourceFile(BaseModel):
    """A Markdown file read from one of the content sources."""

    key: str = Field(..., description="Content source key (e.g. practice)")
    path: str = Field(..., description="Absolute or working-directory path")
    relative: str = Field(..., description="Path relative to the content root")
    text: str = Field("", description="File contents")


class ExtractionStats(BaseModel):
    """Per-strategy card counts for one build."""

    qa: int = 0
    sections: int = 0
    concepts: int = 0
    overview: int = 0

    @property
    def total(self) -> int:
        return self.qa + self.sections + self.concepts + self.overview
