"""
Timing and duration calculations for RSVP reading.

This module provides the TimingCalculator class for computing how long
each precomputed chunk stays on screen, based on reading speed, word
length and trailing punctuation, plus helpers for formatting and
estimating reading times.

Nothing here keeps a clock; warmup progress and WPM are supplied by the
caller that drives playback.
"""

import math
from typing import Any, Iterable, List, Optional

from rsvp_core.config import Settings, get_settings

from .constants import FULL_STOP_CHARS, PARTIAL_STOP_CHARS
from .orp import get_max_word_length


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positives."""
    return math.floor(value + 0.5)


def ease_out_quad(t: float) -> float:
    """
    Ease-out-quad curve used for warmup progression.

    Examples:
        >>> ease_out_quad(0.5)
        0.75
    """
    return t * (2 - t)


class TimingCalculator:
    """
    Calculate display durations for RSVP chunks.

    Factors that affect timing:
    - Reading speed (WPM), optionally ramped up during warmup
    - Word length (longer words need more processing time)
    - Trailing punctuation (full stops pause longer than partial stops)

    Example usage:
        >>> calc = TimingCalculator()
        >>> calc.word_duration_ms("hello", 300)
        200
        >>> calc.word_duration_ms("end.", 300)
        400
        >>> calc.word_duration_ms("word,", 300)
        300
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        *,
        fixed_timing: bool = False,
        punctuation_pauses: bool = True,
        pause_duration_ms: Optional[int] = None,
    ) -> None:
        """
        Initialize the timing calculator.

        Args:
            settings: Configuration with length thresholds and multipliers.
            fixed_timing: Ignore word length when True.
            punctuation_pauses: Add pauses after punctuation when True.
            pause_duration_ms: Base punctuation pause; defaults to the
                configured value.
        """
        self.settings = settings or get_settings()
        self.fixed_timing = fixed_timing
        self.punctuation_pauses = punctuation_pauses
        self.pause_duration_ms = (
            self.settings.pause_duration_default_ms
            if pause_duration_ms is None
            else pause_duration_ms
        )

    def clamp_wpm(self, wpm: Any) -> int:
        """
        Clamp a requested speed to the configured WPM range.

        Non-numeric values fall back to the configured default.

        Examples:
            >>> TimingCalculator().clamp_wpm(5000)
            1500
        """
        settings = self.settings
        if isinstance(wpm, bool) or not isinstance(wpm, (int, float)) or not math.isfinite(wpm):
            return settings.wpm_default
        return max(settings.wpm_min, min(settings.wpm_max, round_half_up(wpm)))

    def effective_wpm(self, target_wpm: int, warmup_progress: float = 1.0) -> int:
        """
        Get the WPM to use at a given warmup progress.

        During warmup the speed rises linearly from ``warmup_start_ratio``
        of the target to the full target.

        Args:
            target_wpm: Target reading speed.
            warmup_progress: Progress from 0 (start) to 1 (complete).

        Returns:
            The effective WPM.

        Examples:
            >>> TimingCalculator().effective_wpm(300, 0.0)
            150
        """
        if warmup_progress >= 1:
            return target_wpm

        start_ratio = self.settings.warmup_start_ratio
        progress = max(0.0, warmup_progress)
        ratio = start_ratio + (1 - start_ratio) * progress
        return round_half_up(target_wpm * ratio)

    def length_multiplier(self, max_length: int) -> float:
        """Duration multiplier for the longest word of a chunk."""
        settings = self.settings
        if max_length > settings.word_length_long:
            return settings.multiplier_very_long
        if max_length > settings.word_length_medium:
            return settings.multiplier_long
        if max_length > settings.word_length_short:
            return settings.multiplier_medium
        return 1.0

    def punctuation_pause_ms(self, text: str) -> float:
        """Extra pause after a chunk based on its last character."""
        if not self.punctuation_pauses or not text:
            return 0.0

        last_char = text[-1]
        if last_char in FULL_STOP_CHARS:
            return self.pause_duration_ms * self.settings.full_stop_pause_ratio
        if last_char in PARTIAL_STOP_CHARS:
            return self.pause_duration_ms * self.settings.partial_stop_pause_ratio
        return 0.0

    def word_duration_ms(
        self,
        text: str,
        wpm: int,
        max_length: Optional[int] = None,
        warmup_progress: float = 1.0,
    ) -> int:
        """
        Calculate display duration for a word or chunk.

        Args:
            text: The word or chunk.
            wpm: Target reading speed.
            max_length: Precomputed letter/digit length of the longest
                word; computed from ``text`` when omitted.
            warmup_progress: Warmup progress from 0 to 1.

        Returns:
            Duration in milliseconds; 0 for empty text or non-positive WPM.
        """
        if not text or wpm <= 0:
            return 0

        effective = self.effective_wpm(wpm, warmup_progress)
        if effective <= 0:
            return 0

        duration = 60_000.0 / effective

        if not self.fixed_timing:
            if max_length is None:
                max_length = get_max_word_length(text)
            duration *= self.length_multiplier(max_length)

        duration += self.punctuation_pause_ms(text)

        return round_half_up(duration)

    def durations_for(self, records: Iterable, wpm: int, warmup_progress: float = 1.0) -> List[int]:
        """
        Calculate durations for precomputed records.

        Args:
            records: Objects with ``text`` and ``max_length`` attributes
                (``PrecomputedRecord``).
            wpm: Target reading speed.
            warmup_progress: Warmup progress from 0 to 1.

        Returns:
            Durations in milliseconds, in record order.
        """
        return [
            self.word_duration_ms(record.text, wpm, record.max_length, warmup_progress)
            for record in records
        ]


def format_time(ms: float, force_hours: bool = False) -> str:
    """
    Format milliseconds as ``M:SS`` or ``H:MM:SS``.

    Examples:
        >>> format_time(65_000)
        '1:05'
        >>> format_time(3_665_000)
        '1:01:05'
    """
    if not ms or ms < 0:
        return "0:00:00" if force_hours else "0:00"

    total_seconds = int(ms // 1000)
    hours = total_seconds // 3600
    minutes = (total_seconds % 3600) // 60
    seconds = total_seconds % 60

    if hours > 0 or force_hours:
        return f"{hours}:{minutes:02d}:{seconds:02d}"

    return f"{minutes}:{seconds:02d}"


def format_minutes(ms: float) -> str:
    """
    Format milliseconds as ``Nm`` or ``Hh Mm``.

    Examples:
        >>> format_minutes(3_660_000)
        '1h 1m'
    """
    if not ms or ms < 0:
        return "0m"

    total_minutes = int(ms // 60_000)
    if total_minutes < 60:
        return f"{total_minutes}m"

    return f"{total_minutes // 60}h {total_minutes % 60}m"


def format_duration(ms: float) -> str:
    """
    Format milliseconds as e.g. ``1h 1m 1s``.

    Examples:
        >>> format_duration(61_000)
        '1m 1s'
    """
    if not ms or ms < 0:
        return "0s"

    total_seconds = int(ms // 1000)
    hours = total_seconds // 3600
    minutes = (total_seconds % 3600) // 60
    seconds = total_seconds % 60

    parts: List[str] = []
    if hours > 0:
        parts.append(f"{hours}h")
    if minutes > 0:
        parts.append(f"{minutes}m")
    if seconds > 0 or not parts:
        parts.append(f"{seconds}s")

    return " ".join(parts)


def estimate_total_time_ms(word_count: int, wpm: int) -> int:
    """
    Estimate reading time for a word count at a given WPM.

    Examples:
        >>> estimate_total_time_ms(300, 300)
        60000
    """
    if word_count <= 0 or wpm <= 0:
        return 0
    return round_half_up(word_count / wpm * 60_000)


def estimate_remaining_time_ms(current_index: int, total_words: int, wpm: int) -> int:
    """Estimate reading time left from a position."""
    return estimate_total_time_ms(max(0, total_words - current_index), wpm)


def calculate_actual_wpm(word_count: int, elapsed_ms: float) -> int:
    """
    Calculate the achieved WPM from words read and elapsed time.

    Examples:
        >>> calculate_actual_wpm(300, 60_000)
        300
    """
    if word_count <= 0 or elapsed_ms <= 0:
        return 0
    return round_half_up(word_count / (elapsed_ms / 60_000))
