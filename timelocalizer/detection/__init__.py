"""
Time Expression Detection Module

This module locates and filters candidate time expressions using:
1. matcher - one composite regex over hours, minutes, meridiems, ranges and timezones
2. validators - an ordered chain of heuristic gates that drop false positives

Usage:
    from timelocalizer.detection import find_candidates, validate, ValidationContext

    for candidate in find_candidates("Let's meet at 3pm EST"):
        ...
"""

from .matcher import (
    TIME_PATTERN,
    RawMatch,
    find_candidates,
    resolve_full_name,
)

from .validators import (
    ABBREVIATIONS_THAT_LOOK_LIKE_WORDS,
    DEFAULT_GATES,
    ValidationContext,
    ValidationGate,
    first_failed_gate,
    validate,
)

__all__ = [
    # matcher
    "TIME_PATTERN",
    "RawMatch",
    "find_candidates",
    "resolve_full_name",
    # validators
    "ABBREVIATIONS_THAT_LOOK_LIKE_WORDS",
    "DEFAULT_GATES",
    "ValidationContext",
    "ValidationGate",
    "first_failed_gate",
    "validate",
]
