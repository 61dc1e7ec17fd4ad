"""RSVP reader text engine: tokenization, ORP placement and display precomputation."""

__version__ = "0.1.0"
