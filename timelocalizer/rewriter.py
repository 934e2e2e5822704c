"""
Reassembly of the source text around generated timestamp markers.

Each detected time is replaced with a ``<t:EPOCH:STYLE>`` marker that the
chat client renders in the reader's own timezone. Text outside the detected
spans is copied through untouched.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

MARKER_OPENING = "<t:"
ESCAPED_MARKER_OPENING = "\\<t:"
EN_DASH = "–"


class TimestampStyle(Enum):
    """Rendering style codes understood by the marker renderer."""
    SHORT_TIME = "t"
    LONG_TIME = "T"
    SHORT_DATE = "d"
    LONG_DATE = "D"
    SHORT_DATE_TIME = "f"
    LONG_DATE_TIME = "F"
    RELATIVE = "R"

    @classmethod
    def coerce(cls, mode) -> "TimestampStyle":
        """Accept a style or its code; anything unknown falls back to SHORT_TIME."""
        if isinstance(mode, cls):
            return mode
        try:
            return cls(mode)
        except ValueError:
            return cls.SHORT_TIME


DEFAULT_STYLE = TimestampStyle.SHORT_TIME


@dataclass
class LocalizedSpan:
    """A matched region of the source text and its replacement."""
    rendered_text: str
    start: int          # Start character offset in the source text
    length: int         # Length of the matched region in the source text

    @property
    def end(self) -> int:
        return self.start + self.length


def format_marker(epoch: int, style: TimestampStyle = DEFAULT_STYLE) -> str:
    return f"{MARKER_OPENING}{epoch}:{style.value}>"


def format_range(
    start_epoch: int,
    end_epoch: int,
    separator: str,
    style: TimestampStyle = DEFAULT_STYLE,
) -> str:
    """Two markers joined by the writer's own separator; a lone dash becomes an en dash."""
    if len(separator) == 1:
        separator = EN_DASH
    return f"{format_marker(start_epoch, style)} {separator} {format_marker(end_epoch, style)}"


def escape_markers(text: str) -> str:
    """Escape every marker opening so the text can be pasted back verbatim."""
    return text.replace(MARKER_OPENING, ESCAPED_MARKER_OPENING)


def rewrite(text: str, spans: List[LocalizedSpan], raw: bool = False) -> Optional[str]:
    """
    Replace each span of ``text`` with its rendered marker.

    Args:
        text: The original source text.
        spans: Non-overlapping spans ordered by ``start``.
        raw: Escape the markers in the result.

    Returns:
        The rewritten text, or None if there are no spans.
    """
    if not spans:
        return None

    parts = [text[:spans[0].start]]
    for position, span in enumerate(spans):
        parts.append(span.rendered_text)
        if position + 1 < len(spans):
            parts.append(text[span.end:spans[position + 1].start])
        else:
            parts.append(text[span.end:])

    output = "".join(parts)
    if raw:
        output = escape_markers(output)
    return output
