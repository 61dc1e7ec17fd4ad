"""Health check API route."""

import logging

from fastapi import APIRouter

from rsvp_core import __version__
from rsvp_core.services.tokenizer import UNICODE_PROPERTIES_AVAILABLE, get_tokenizer_version

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/health")
def health_check() -> dict:
    """Health check endpoint."""
    if not UNICODE_PROPERTIES_AVAILABLE:
        logger.warning("Unicode property data unavailable; using script allow-list")

    return {
        "status": "ok" if UNICODE_PROPERTIES_AVAILABLE else "degraded",
        "unicode_properties": UNICODE_PROPERTIES_AVAILABLE,
        "tokenizer_version": get_tokenizer_version(),
        "version": __version__,
    }
