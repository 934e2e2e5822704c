"""
Heuristic validation of candidate time expressions.

The matcher is deliberately loose; most of what it finds in chat text is not
a timezone-qualified time at all ("12pt font", "1080p", "2015 estimates",
"3 cats"). Each rule below is an independent gate over a :class:`RawMatch`.
A candidate is accepted only if every gate passes; the first failing gate
rejects it.

Candidates whose timezone resolved from an unambiguous full title skip the
gates entirely.
"""

import logging
from dataclasses import dataclass
from typing import Callable, FrozenSet, List, Mapping, Optional

import regex as re

from .matcher import RawMatch

logger = logging.getLogger(__name__)


# =============================================================================
# Constants
# =============================================================================

# A match preceded by one of these is a fragment of a larger token
# ("30:15 gmt", "$5 cat", "1.5 est", "it's 3 met")
PRECEDING_CHARACTER_PATTERN = re.compile(r"[-:.,'%\d$£€]")

# Abbreviations that are also ordinary words
ABBREVIATIONS_THAT_LOOK_LIKE_WORDS: FrozenSet[str] = frozenset([
    'art', 'bit', 'bot', 'cat', 'cost', 'cot',
    'east', 'eat', 'ect', 'get', 'git', 'mart',
    'met', 'nut', 'pet', 'tot', 'volt', 'west', 'wet',
    'ist', 'kalt', 'gilt', 'mit', 'mut',
])

# "15 EST" reads as a year or an estimate above this
ESTIMATE_THRESHOLD = 14


# =============================================================================
# Data Structures
# =============================================================================

@dataclass
class ValidationContext:
    """Everything a gate may consult besides the candidate itself."""
    text: str
    offsets: Mapping[str, int]
    ignored: FrozenSet[str] = frozenset()
    blank_separator: bool = True
    avoid_matching_floats_manually: bool = True
    manual: bool = False


@dataclass
class ValidationGate:
    """A named predicate; returns True when the candidate may pass."""
    name: str
    check: Callable[[RawMatch, ValidationContext], bool]
    manual_only: bool = False


# =============================================================================
# Gates
# =============================================================================

def known_timezone(candidate: RawMatch, context: ValidationContext) -> bool:
    upper = candidate.upper_timezone
    return upper is not None and upper in context.offsets and upper not in context.ignored


def consistent_case(candidate: RawMatch, context: ValidationContext) -> bool:
    # "EST" and "est" are abbreviations, "Est" is a word
    raw = candidate.timezone
    return raw == raw.upper() or raw == raw.lower()


def blank_separator_allowed(candidate: RawMatch, context: ValidationContext) -> bool:
    return not (candidate.minutes and not candidate.separator and not context.blank_separator)


def separator_has_minutes(candidate: RawMatch, context: ValidationContext) -> bool:
    return not (candidate.separator and not candidate.minutes)


def clean_preceding_character(candidate: RawMatch, context: ValidationContext) -> bool:
    if candidate.index == 0:
        return True
    previous = context.text[candidate.index - 1]
    return not PRECEDING_CHARACTER_PATTERN.match(previous)


def not_font_size(candidate: RawMatch, context: ValidationContext) -> bool:
    # 12pt
    return not (candidate.timezone == 'pt' and not (candidate.meridiem or candidate.minutes))


def not_estimate(candidate: RawMatch, context: ValidationContext) -> bool:
    # "2015 EST", "20 est."
    if candidate.upper_timezone != 'EST' or candidate.meridiem or candidate.separator:
        return True
    return int(candidate.hour + (candidate.minutes or '')) <= ESTIMATE_THRESHOLD


def not_resolution(candidate: RawMatch, context: ValidationContext) -> bool:
    """
    720p, 1080p. A lowercase "p" with blank-separated minutes is a video
    resolution, except before IST ("1030p IST" is common enough).
    """
    return not (
        candidate.minutes
        and not candidate.separator
        and candidate.meridiem == 'p'
        and candidate.timezone != 'IST'
    )


def not_confusable_word(candidate: RawMatch, context: ValidationContext) -> bool:
    if candidate.timezone not in ABBREVIATIONS_THAT_LOOK_LIKE_WORDS:
        return True

    has_separated_minutes = bool(candidate.minutes and candidate.separator)
    if not (candidate.meridiem or has_separated_minutes):
        return False

    # "3 a bit"
    if candidate.meridiem == 'a' and not has_separated_minutes:
        return False

    return True


def structured_manual_time(candidate: RawMatch, context: ValidationContext) -> bool:
    """Without a written timezone, only times with a separator or meridiem count."""
    if not (candidate.separator or candidate.meridiem):
        return False

    # "3.50" is more likely a price or a measurement
    if (
        context.avoid_matching_floats_manually
        and candidate.separator == '.'
        and candidate.minutes
        and not candidate.meridiem
    ):
        return False

    return True


DEFAULT_GATES: List[ValidationGate] = [
    ValidationGate('known_timezone', known_timezone),
    ValidationGate('consistent_case', consistent_case),
    ValidationGate('blank_separator_allowed', blank_separator_allowed),
    ValidationGate('separator_has_minutes', separator_has_minutes),
    ValidationGate('clean_preceding_character', clean_preceding_character),
    ValidationGate('not_font_size', not_font_size),
    ValidationGate('not_estimate', not_estimate),
    ValidationGate('not_resolution', not_resolution),
    ValidationGate('not_confusable_word', not_confusable_word),
    ValidationGate('structured_manual_time', structured_manual_time, manual_only=True),
]


# =============================================================================
# Validation
# =============================================================================

def first_failed_gate(
    candidate: RawMatch,
    context: ValidationContext,
    gates: Optional[List[ValidationGate]] = None,
) -> Optional[ValidationGate]:
    """Return the first gate that rejects ``candidate``, or None if all pass."""
    for gate in gates if gates is not None else DEFAULT_GATES:
        if gate.manual_only and not context.manual:
            continue
        if not gate.check(candidate, context):
            return gate
    return None


def validate(
    candidate: RawMatch,
    context: ValidationContext,
    gates: Optional[List[ValidationGate]] = None,
) -> bool:
    """
    Decide whether a candidate is a genuine timezone-qualified time.

    Full-title matches (``full_name_offset`` set) are accepted as is.
    """
    if candidate.full_name_offset is not None:
        return True

    failed = first_failed_gate(candidate, context, gates)
    if failed is not None:
        logger.debug(
            f"Rejected '{candidate.text}' at {candidate.index}: {failed.name}"
        )
        return False
    return True
