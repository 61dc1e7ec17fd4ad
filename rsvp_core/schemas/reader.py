"""Pydantic schemas for reader API endpoints."""

from pydantic import BaseModel, ConfigDict, Field


class SchemaBase(BaseModel):
    """Base schema reading attributes from the core dataclasses."""

    model_config = ConfigDict(from_attributes=True)


class PrepareRequest(BaseModel):
    text: str = Field(..., min_length=1)
    chunk_size: int | None = Field(None, ge=1)
    orp_enabled: bool = True
    bionic_mode: bool = False
    wpm: int | None = Field(None, ge=1)


class WordPartsDTO(SchemaBase):
    before: str
    orp: str
    after: str


class PrecomputedRecordDTO(SchemaBase):
    text: str
    parts: list[WordPartsDTO]
    html: str
    max_length: int
    orp_index: int
    word_count: int


class PrepareResponse(BaseModel):
    word_count: int
    chunk_count: int
    wpm: int
    records: list[PrecomputedRecordDTO]
    durations_ms: list[int]


class StatsRequest(BaseModel):
    text: str
    wpm: int | None = Field(None, ge=1)


class TextStatsDTO(SchemaBase):
    word_count: int
    char_count: int
    sentence_count: int
    avg_word_length: float
    estimated_time_ms: int
    estimated_time_formatted: str


class StripHtmlRequest(BaseModel):
    html: str


class StripHtmlResponse(BaseModel):
    text: str
    word_count: int


class ContextRequest(BaseModel):
    text: str
    index: int = Field(0, ge=0)
    context_size: int | None = Field(None, ge=1)


class ContextDTO(SchemaBase):
    before: str
    current: str
    after: str
