"""Business logic services for the RSVP reader."""

from rsvp_core.services.tokenizer import (
    ORPCalculator,
    TimingCalculator,
    parse_text,
    precompute_words,
    prepare_reading_script,
)

__all__ = [
    "ORPCalculator",
    "TimingCalculator",
    "parse_text",
    "precompute_words",
    "prepare_reading_script",
]
