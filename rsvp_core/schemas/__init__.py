"""Pydantic schemas for the RSVP reader API."""

from rsvp_core.schemas.reader import (
    ContextDTO,
    ContextRequest,
    PrecomputedRecordDTO,
    PrepareRequest,
    PrepareResponse,
    StatsRequest,
    StripHtmlRequest,
    StripHtmlResponse,
    TextStatsDTO,
    WordPartsDTO,
)

__all__ = [
    # Requests
    "PrepareRequest",
    "StatsRequest",
    "StripHtmlRequest",
    "ContextRequest",
    # Responses
    "WordPartsDTO",
    "PrecomputedRecordDTO",
    "PrepareResponse",
    "TextStatsDTO",
    "StripHtmlResponse",
    "ContextDTO",
]
