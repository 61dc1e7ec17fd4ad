"""Reader API routes: text preparation, statistics and extraction."""

import logging

from fastapi import APIRouter, Depends, HTTPException

from rsvp_core.config import Settings, get_settings
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
)
from rsvp_core.services.tokenizer import (
    TimingCalculator,
    count_words,
    get_context,
    get_text_stats,
    parse_text,
    prepare_reading_script,
    strip_html,
)

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/prepare", response_model=PrepareResponse)
def prepare(
    request: PrepareRequest,
    settings: Settings = Depends(get_settings),
) -> PrepareResponse:
    """Parse, chunk and precompute text for playback, with display durations."""
    script = prepare_reading_script(
        request.text,
        chunk_size=request.chunk_size,
        orp_enabled=request.orp_enabled,
        bionic_mode=request.bionic_mode,
        settings=settings,
    )

    if not script.success:
        logger.info("Rejected text for playback: %s", script.error)
        raise HTTPException(
            status_code=422,
            detail=script.error,
        )

    timing = TimingCalculator(settings)
    wpm = timing.clamp_wpm(request.wpm if request.wpm is not None else settings.wpm_default)

    return PrepareResponse(
        word_count=script.word_count,
        chunk_count=script.chunk_count,
        wpm=wpm,
        records=[PrecomputedRecordDTO.model_validate(record) for record in script.records],
        durations_ms=timing.durations_for(script.records, wpm),
    )


@router.post("/stats", response_model=TextStatsDTO)
def stats(
    request: StatsRequest,
    settings: Settings = Depends(get_settings),
) -> TextStatsDTO:
    """Reading statistics for text at a given WPM."""
    wpm = request.wpm if request.wpm is not None else settings.wpm_default
    return TextStatsDTO.model_validate(get_text_stats(request.text, wpm))


@router.post("/strip-html", response_model=StripHtmlResponse)
def strip(request: StripHtmlRequest) -> StripHtmlResponse:
    """Extract readable plain text from HTML."""
    text = strip_html(request.html)
    return StripHtmlResponse(text=text, word_count=count_words(text))


@router.post("/context", response_model=ContextDTO)
def context(
    request: ContextRequest,
    settings: Settings = Depends(get_settings),
) -> ContextDTO:
    """Words surrounding a position in the text."""
    size = request.context_size if request.context_size is not None else settings.context_size_default
    window = get_context(parse_text(request.text), request.index, size)
    return ContextDTO.model_validate(window)
