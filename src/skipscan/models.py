"""Pydantic models for CLI search results."""

from __future__ import annotations

from pydantic import BaseModel, Field


class MatchRecord(BaseModel):
    """A single match found by a searcher."""

    offset: int = Field(description="Start offset in symbols")
    match: str = Field(description="Matched symbols rendered as text")
    following: str = Field(description="Text after the match")
    comparisons: int = Field(
        description="Searcher comparison count when the match was reported"
    )


class SearchReport(BaseModel):
    """All matches of one pattern for one algorithm."""

    algorithm: str
    pattern: str
    encoding: str
    buffer_length: int = Field(description="Buffer length in symbols")
    matches: list[MatchRecord] = Field(default_factory=list)
    comparisons: int = Field(description="Total window alignments")
    elapsed_ms: float | None = None

    @property
    def offsets(self) -> list[int]:
        return [m.offset for m in self.matches]


class ComparisonSummary(BaseModel):
    """Cross-algorithm comparison produced by ``skipscan compare``."""

    pattern: str
    encoding: str
    buffer_length: int
    agree: bool = Field(description="All algorithms found the same offsets")
    reports: list[SearchReport]
