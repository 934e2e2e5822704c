"""
Timezone Alias Table

Static reference data for the timezone abbreviations that may follow a time
expression in free text, e.g. "3pm EST" or "14:00 UTC+2".

Each abbreviation has one or more titled entries. The first entry listed for
an abbreviation is its default meaning (IST is India Standard Time unless the
text spells out "Irish Standard Time"). Offsets are signed minutes east of
UTC, so UTC+5:30 is 330 and UTC-5 is -300.

Only the four US shorthands (ET, CT, MT, PT) carry distinct standard and
daylight offsets; their effective value is decided per call by
:mod:`timelocalizer.dst`.
"""

from dataclasses import dataclass
from typing import Dict, List, Tuple


@dataclass(frozen=True)
class TimezoneAlias:
    """A single titled meaning of a timezone abbreviation."""
    abbreviation: str
    standard_offset: int            # Minutes east of UTC
    daylight_offset: int            # Same as standard_offset unless DST-sensitive
    full_title: str

    @property
    def observes_dst(self) -> bool:
        return self.standard_offset != self.daylight_offset


# =============================================================================
# Fixed-offset abbreviations
# =============================================================================

# (abbreviation, offset minutes, full title)
_FIXED_OFFSETS: List[Tuple[str, int, str]] = [
    ("ACDT", 630, "Australian Central Daylight Time"),
    ("ACST", 570, "Australian Central Standard Time"),
    ("ACT", -300, "Acre Time"),
    ("ACWST", 525, "Australian Central Western Standard Time"),
    ("ADT", -180, "Atlantic Daylight Time"),
    ("AEDT", 660, "Australian Eastern Daylight Time"),
    ("AEST", 600, "Australian Eastern Standard Time"),
    ("AFT", 270, "Afghanistan Time"),
    ("AKDT", -480, "Alaska Daylight Time"),
    ("AKST", -540, "Alaska Standard Time"),
    ("ALMT", 300, "Alma-Ata Time"),
    ("AMST", -180, "Amazon Summer Time"),
    ("AMT", -240, "Amazon Time"),
    ("AMT", 240, "Armenia Time"),
    ("ANAT", 720, "Anadyr Time"),
    ("AOE", -720, "Anywhere on Earth"),
    ("AQTT", 300, "Aqtobe Time"),
    ("ART", -180, "Argentina Time"),
    ("AST", -240, "Atlantic Standard Time"),
    ("AST", 180, "Arabia Standard Time"),
    ("AWST", 480, "Australian Western Standard Time"),
    ("AZOST", 0, "Azores Summer Time"),
    ("AZOT", -60, "Azores Standard Time"),
    ("AZT", 240, "Azerbaijan Time"),
    ("BIT", -720, "Baker Island Time"),
    ("BNT", 480, "Brunei Time"),
    ("BOT", -240, "Bolivia Time"),
    ("BRST", -120, "Brasília Summer Time"),
    ("BRT", -180, "Brasília Time"),
    ("BST", 60, "British Summer Time"),
    ("BST", 360, "Bangladesh Standard Time"),
    ("BTT", 360, "Bhutan Time"),
    ("CAT", 120, "Central Africa Time"),
    ("CCT", 390, "Cocos Islands Time"),
    ("CDT", -300, "Central Daylight Time"),
    ("CEST", 120, "Central European Summer Time"),
    ("CET", 60, "Central European Time"),
    ("CHADT", 825, "Chatham Daylight Time"),
    ("CHAST", 765, "Chatham Standard Time"),
    ("CHOT", 480, "Choibalsan Time"),
    ("CHST", 600, "Chamorro Standard Time"),
    ("CHUT", 600, "Chuuk Time"),
    ("CKT", -600, "Cook Islands Time"),
    ("CLST", -180, "Chile Summer Time"),
    ("CLT", -240, "Chile Standard Time"),
    ("COST", -240, "Colombia Summer Time"),
    ("COT", -300, "Colombia Time"),
    ("CST", -360, "Central Standard Time"),
    ("CST", 480, "China Standard Time"),
    ("CST", -300, "Cuba Standard Time"),
    ("CVT", -60, "Cape Verde Time"),
    ("CXT", 420, "Christmas Island Time"),
    ("DAVT", 420, "Davis Time"),
    ("EASST", -300, "Easter Island Summer Time"),
    ("EAST", -360, "Easter Island Standard Time"),
    ("EAT", 180, "East Africa Time"),
    ("ECT", -300, "Ecuador Time"),
    ("EDT", -240, "Eastern Daylight Time"),
    ("EEST", 180, "Eastern European Summer Time"),
    ("EET", 120, "Eastern European Time"),
    ("EGST", 0, "Eastern Greenland Summer Time"),
    ("EGT", -60, "Eastern Greenland Time"),
    ("EST", -300, "Eastern Standard Time"),
    ("FET", 180, "Further-eastern European Time"),
    ("FJT", 720, "Fiji Time"),
    ("FKST", -180, "Falkland Islands Summer Time"),
    ("FKT", -240, "Falkland Islands Time"),
    ("FNT", -120, "Fernando de Noronha Time"),
    ("GALT", -360, "Galápagos Time"),
    ("GAMT", -540, "Gambier Islands Time"),
    ("GET", 240, "Georgia Standard Time"),
    ("GFT", -180, "French Guiana Time"),
    ("GILT", 720, "Gilbert Island Time"),
    ("GIT", -540, "Gambier Island Time"),
    ("GMT", 0, "Greenwich Mean Time"),
    ("GST", 240, "Gulf Standard Time"),
    ("GST", -120, "South Georgia Time"),
    ("GYT", -240, "Guyana Time"),
    ("HDT", -540, "Hawaii-Aleutian Daylight Time"),
    ("HKT", 480, "Hong Kong Time"),
    ("HOVT", 420, "Hovd Time"),
    ("HST", -600, "Hawaii-Aleutian Standard Time"),
    ("ICT", 420, "Indochina Time"),
    ("IDT", 180, "Israel Daylight Time"),
    ("IOT", 360, "Indian Ocean Time"),
    ("IRDT", 270, "Iran Daylight Time"),
    ("IRKT", 480, "Irkutsk Time"),
    ("IRST", 210, "Iran Standard Time"),
    ("IST", 330, "India Standard Time"),
    ("IST", 60, "Irish Standard Time"),
    ("IST", 120, "Israel Standard Time"),
    ("JST", 540, "Japan Standard Time"),
    ("KALT", 120, "Kaliningrad Time"),
    ("KGT", 360, "Kyrgyzstan Time"),
    ("KOST", 660, "Kosrae Time"),
    ("KRAT", 420, "Krasnoyarsk Time"),
    ("KST", 540, "Korea Standard Time"),
    ("LHST", 630, "Lord Howe Standard Time"),
    ("LINT", 840, "Line Islands Time"),
    ("MAGT", 660, "Magadan Time"),
    ("MART", -570, "Marquesas Islands Time"),
    ("MAWT", 300, "Mawson Station Time"),
    ("MDT", -360, "Mountain Daylight Time"),
    ("MEST", 120, "Middle European Summer Time"),
    ("MET", 60, "Middle European Time"),
    ("MHT", 720, "Marshall Islands Time"),
    ("MIST", 660, "Macquarie Island Station Time"),
    ("MIT", -570, "Marquesas Island Time"),
    ("MMT", 390, "Myanmar Standard Time"),
    ("MSK", 180, "Moscow Time"),
    ("MST", -420, "Mountain Standard Time"),
    ("MST", 480, "Malaysia Standard Time"),
    ("MUT", 240, "Mauritius Time"),
    ("MVT", 300, "Maldives Time"),
    ("MYT", 480, "Malaysia Time"),
    ("NCT", 660, "New Caledonia Time"),
    ("NDT", -150, "Newfoundland Daylight Time"),
    ("NFT", 660, "Norfolk Island Time"),
    ("NOVT", 420, "Novosibirsk Time"),
    ("NPT", 345, "Nepal Time"),
    ("NST", -210, "Newfoundland Standard Time"),
    ("NUT", -660, "Niue Time"),
    ("NZDT", 780, "New Zealand Daylight Time"),
    ("NZST", 720, "New Zealand Standard Time"),
    ("OMST", 360, "Omsk Time"),
    ("ORAT", 300, "Oral Time"),
    ("PDT", -420, "Pacific Daylight Time"),
    ("PET", -300, "Peru Time"),
    ("PETT", 720, "Kamchatka Time"),
    ("PGT", 600, "Papua New Guinea Time"),
    ("PHOT", 780, "Phoenix Island Time"),
    ("PHT", 480, "Philippine Time"),
    ("PKT", 300, "Pakistan Standard Time"),
    ("PMDT", -120, "Saint Pierre and Miquelon Daylight Time"),
    ("PMST", -180, "Saint Pierre and Miquelon Standard Time"),
    ("PONT", 660, "Pohnpei Standard Time"),
    ("PST", -480, "Pacific Standard Time"),
    ("PWT", 540, "Palau Time"),
    ("PYST", -180, "Paraguay Summer Time"),
    ("PYT", -240, "Paraguay Time"),
    ("RET", 240, "Réunion Time"),
    ("ROTT", -180, "Rothera Research Station Time"),
    ("SAKT", 660, "Sakhalin Island Time"),
    ("SAMT", 240, "Samara Time"),
    ("SAST", 120, "South African Standard Time"),
    ("SBT", 660, "Solomon Islands Time"),
    ("SCT", 240, "Seychelles Time"),
    ("SGT", 480, "Singapore Time"),
    ("SLST", 330, "Sri Lanka Standard Time"),
    ("SRET", 660, "Srednekolymsk Time"),
    ("SRT", -180, "Suriname Time"),
    ("SST", -660, "Samoa Standard Time"),
    ("SYOT", 180, "Showa Station Time"),
    ("TAHT", -600, "Tahiti Time"),
    ("TFT", 300, "French Southern and Antarctic Time"),
    ("THA", 420, "Thailand Standard Time"),
    ("TJT", 300, "Tajikistan Time"),
    ("TKT", 780, "Tokelau Time"),
    ("TLT", 540, "Timor Leste Time"),
    ("TMT", 300, "Turkmenistan Time"),
    ("TOT", 780, "Tonga Time"),
    ("TRT", 180, "Turkey Time"),
    ("TVT", 720, "Tuvalu Time"),
    ("ULAT", 480, "Ulaanbaatar Standard Time"),
    ("UTC", 0, "Coordinated Universal Time"),
    ("UYST", -120, "Uruguay Summer Time"),
    ("UYT", -180, "Uruguay Standard Time"),
    ("UZT", 300, "Uzbekistan Time"),
    ("VET", -240, "Venezuelan Standard Time"),
    ("VLAT", 600, "Vladivostok Time"),
    ("VOLT", 180, "Volgograd Time"),
    ("VOST", 360, "Vostok Station Time"),
    ("VUT", 660, "Vanuatu Time"),
    ("WAKT", 720, "Wake Island Time"),
    ("WAST", 120, "West Africa Summer Time"),
    ("WAT", 60, "West Africa Time"),
    ("WEST", 60, "Western European Summer Time"),
    ("WET", 0, "Western European Time"),
    ("WGST", -60, "West Greenland Summer Time"),
    ("WGT", -120, "West Greenland Time"),
    ("WIB", 420, "Western Indonesian Time"),
    ("WIT", 540, "Eastern Indonesian Time"),
    ("WITA", 480, "Central Indonesian Time"),
    ("YAKT", 540, "Yakutsk Time"),
    ("YEKT", 300, "Yekaterinburg Time"),
]


# =============================================================================
# US DST-sensitive shorthands
# =============================================================================

# (shorthand, standard abbreviation, daylight abbreviation, spoken name)
US_DST_ZONES: List[Tuple[str, str, str, str]] = [
    ("ET", "EST", "EDT", "Eastern Time"),
    ("CT", "CST", "CDT", "Central Time"),
    ("MT", "MST", "MDT", "Mountain Time"),
    ("PT", "PST", "PDT", "Pacific Time"),
]

# Full spoken names that coincide with a DST-patched abbreviation
SHORTHAND_NAMES: Dict[str, str] = {
    shorthand: name for shorthand, _, _, name in US_DST_ZONES
}


def _build_aliases() -> Tuple[TimezoneAlias, ...]:
    aliases = [
        TimezoneAlias(abbr, offset, offset, title)
        for abbr, offset, title in _FIXED_OFFSETS
    ]
    defaults = {}
    for alias in aliases:
        defaults.setdefault(alias.abbreviation, alias.standard_offset)

    for shorthand, standard, daylight, name in US_DST_ZONES:
        aliases.append(TimezoneAlias(shorthand, defaults[standard], defaults[daylight], name))

    return tuple(aliases)


TIMEZONE_ALIASES: Tuple[TimezoneAlias, ...] = _build_aliases()


def _build_default_offsets() -> Dict[str, int]:
    offsets: Dict[str, int] = {}
    for alias in TIMEZONE_ALIASES:
        offsets.setdefault(alias.abbreviation, alias.standard_offset)
    return offsets


def _build_title_index() -> Dict[str, TimezoneAlias]:
    index: Dict[str, TimezoneAlias] = {}
    for alias in TIMEZONE_ALIASES:
        index.setdefault(alias.full_title.lower(), alias)
    return index


# Uppercase abbreviation -> default offset. DST-sensitive shorthands hold their
# standard offset here; see dst.resolve_offsets() for the effective values.
DEFAULT_OFFSETS: Dict[str, int] = _build_default_offsets()

# Lowercase full title -> alias
TITLE_INDEX: Dict[str, TimezoneAlias] = _build_title_index()


def get_abbreviations() -> List[str]:
    """Known abbreviations, longest first so regex alternation prefers e.g. WITA over WIT."""
    return sorted(DEFAULT_OFFSETS, key=lambda abbr: (-len(abbr), abbr))


def lookup_title(title: str):
    """Return the :class:`TimezoneAlias` whose full title matches ``title``, or None."""
    return TITLE_INDEX.get(title.strip().lower())


def lookup_shorthand(name: str):
    """Map a spoken name like "pacific time" back to its shorthand ("PT"), or None."""
    lowered = name.strip().lower()
    for shorthand, spoken in SHORTHAND_NAMES.items():
        if spoken.lower() == lowered:
            return shorthand
    return None


def is_known_abbreviation(abbreviation: str) -> bool:
    return abbreviation.upper() in DEFAULT_OFFSETS
