__version__ = "1.0.0"

from .conf import apply_settings, Settings, SettingValidationError
from .localizer import TimeLocalizer, LocalizeResult, NO_INPUT, NO_TIMES_DETECTED

from .timezones import (
    TimezoneAlias,
    TIMEZONE_ALIASES,
    SHORTHAND_NAMES,
)
from .dst import resolve_offsets, resolve_dst
from .rewriter import TimestampStyle, LocalizedSpan

# =============================================================================
# Detection Module Exports
# =============================================================================

from .detection.matcher import (
    RawMatch,
    find_candidates,
)
from .detection.validators import (
    ValidationContext,
    ValidationGate,
    DEFAULT_GATES,
    validate,
)

_default_localizer = TimeLocalizer()


@apply_settings
def localize(text, mode="t", raw=False, settings=None):
    """Rewrite timezone-qualified times in free text into timestamp markers.

    Every time followed by a timezone ("3pm EST", "9-11am PT", "14:00 UTC+2",
    "10:30 Irish Standard Time") becomes a ``<t:EPOCH:STYLE>`` marker that
    renders in each reader's own timezone.

    :param text:
        Free-form text.
    :type text: str

    :param mode:
        Output style code, one of ``t T d D f F R``. Unknown codes fall back to ``t``.
    :type mode: str

    :param raw:
        Escape the generated markers (``\\<t:``) so the output can be re-posted as literal text.
    :type raw: bool

    :param settings:
        Configure customized behavior using settings defined in :mod:`timelocalizer.conf.Settings`.
    :type settings: dict

    :return: A ``(text, matched)`` pair. ``text`` is the rewritten input when ``matched``
        is True, otherwise ``"noInput"`` or ``"noTimesDetected"``.
    :rtype: LocalizeResult

    :raises:
        ``SettingValidationError``: A provided setting is not valid.

    Example usage::

        >>> import timelocalizer
        >>> text, matched = timelocalizer.localize("Let's meet at 3pm EST")
        >>> matched
        True
        >>> text.startswith("Let's meet at <t:")
        True

        >>> timelocalizer.localize("font size 12pt")
        LocalizeResult(text='noTimesDetected', matched=False)
    """
    localizer = _default_localizer

    if not settings._default:
        localizer = TimeLocalizer(settings=settings)

    return localizer.localize(text, mode=mode, raw=raw)
