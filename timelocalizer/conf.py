from datetime import datetime
from functools import wraps

from dateutil import tz

from .timezones import is_known_abbreviation

DEFAULT_SETTINGS = {
    "IGNORED_TIMEZONES": [],
    "BLANK_SEPARATOR": True,
    "AVOID_MATCHING_FLOATS_MANUALLY": True,
    "ASSUMED_TIMEZONE": None,
    "TIMEZONE": "local",
    "RELATIVE_BASE": False,
}


class Settings:
    """Control and configure default localizing behavior of timelocalizer.
    Currently, supported settings are:

    * `IGNORED_TIMEZONES`
    * `BLANK_SEPARATOR`
    * `AVOID_MATCHING_FLOATS_MANUALLY`
    * `ASSUMED_TIMEZONE`
    * `TIMEZONE`
    * `RELATIVE_BASE`
    """

    _default = True
    _mod_settings = dict()

    def __init__(self, settings=None):
        if settings:
            self._updateall(settings.items())
        else:
            self._updateall(DEFAULT_SETTINGS.items())

    def _updateall(self, iterable):
        for key, value in iterable:
            setattr(self, key, value)

    def replace(self, mod_settings=None, **kwds):
        for x in DEFAULT_SETTINGS.keys():
            kwds.setdefault(x, getattr(self, x))

        kwds["_default"] = False
        if mod_settings:
            kwds["_mod_settings"] = mod_settings

        return self.__class__(settings=kwds)

    @property
    def ignored_timezones(self):
        return frozenset(abbr.upper() for abbr in self.IGNORED_TIMEZONES)


settings = Settings()


def apply_settings(f):
    @wraps(f)
    def wrapper(*args, **kwargs):
        mod_settings = kwargs.get("settings")
        kwargs["settings"] = mod_settings or settings

        if isinstance(kwargs["settings"], dict):
            kwargs["settings"] = settings.replace(
                mod_settings=mod_settings, **kwargs["settings"]
            )

        if not isinstance(kwargs["settings"], Settings):
            raise TypeError(
                "settings can only be either dict or instance of Settings class"
            )

        return f(*args, **kwargs)

    return wrapper


class SettingValidationError(ValueError):
    pass


def _check_ignored_timezones(setting_name, setting_value):
    for abbreviation in setting_value:
        if not isinstance(abbreviation, str):
            raise SettingValidationError(
                'All elements of "{}" must be "str", not "{}".'.format(
                    setting_name, type(abbreviation).__name__
                )
            )


def _check_assumed_timezone(setting_name, setting_value):
    if not is_known_abbreviation(setting_value):
        raise SettingValidationError(
            '"{}" is not a known timezone abbreviation for "{}".'.format(
                setting_value, setting_name
            )
        )


def _check_timezone(setting_name, setting_value):
    if "local" in setting_value.lower():
        return
    if tz.gettz(setting_value) is None:
        raise SettingValidationError(
            '"{}" is not a valid value for "{}".'.format(setting_value, setting_name)
        )


def check_settings(settings):
    """
    Check if provided settings are valid, if not it raises `SettingValidationError`.
    Only checks for the modified settings.
    """
    settings_values = {
        "IGNORED_TIMEZONES": {
            "type": list,
            "extra_check": _check_ignored_timezones,
        },
        "BLANK_SEPARATOR": {
            "type": bool,
        },
        "AVOID_MATCHING_FLOATS_MANUALLY": {
            "type": bool,
        },
        "ASSUMED_TIMEZONE": {
            "type": str,
            "nullable": True,
            "extra_check": _check_assumed_timezone,
        },
        "TIMEZONE": {
            "type": str,
            "extra_check": _check_timezone,
        },
        "RELATIVE_BASE": {
            "type": datetime,
            "falseable": True,
        },
    }

    modified_settings = settings._mod_settings  # check only modified settings

    # check settings keys:
    for setting in modified_settings:
        if setting not in settings_values:
            raise SettingValidationError('"{}" is not a valid setting'.format(setting))

    for setting_name, setting_value in modified_settings.items():
        setting_type = type(setting_value)
        setting_props = settings_values[setting_name]

        if setting_value is None and setting_props.get("nullable"):
            continue

        # False is the "unset" default of RELATIVE_BASE
        if setting_value is False and setting_props.get("falseable"):
            continue

        # check type:
        if not setting_type == setting_props["type"]:
            raise SettingValidationError(
                '"{}" must be "{}", not "{}".'.format(
                    setting_name, setting_props["type"].__name__, setting_type.__name__
                )
            )

        # specific checks
        extra_check = setting_props.get("extra_check")
        if extra_check:
            extra_check(setting_name, setting_value)
