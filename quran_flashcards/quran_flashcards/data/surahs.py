"""
Surah name table.

Maps lowercase transliterated surah names to surah numbers. The table is built
once at import time and exposed read-only. Canonical names are listed first,
in surah order, followed by common alternative spellings.
"""

from types import MappingProxyType
from typing import Mapping

MIN_SURAH = 1
MAX_SURAH = 114

# Prefix that marks a name as presentable in get_surah_display_name
DISPLAY_PREFIX = "al-"

_CANONICAL_NAMES: tuple[str, ...] = (
    "al-fatihah",
    "al-baqarah",
    "ali-imran",
    "an-nisa",
    "al-maidah",
    "al-anam",
    "al-araf",
    "al-anfal",
    "at-tawbah",
    "yunus",
    "hud",
    "yusuf",
    "ar-rad",
    "ibrahim",
    "al-hijr",
    "an-nahl",
    "al-isra",
    "al-kahf",
    "maryam",
    "taha",
    "al-anbya",
    "al-hajj",
    "al-muminun",
    "an-nur",
    "al-furqan",
    "ash-shuara",
    "an-naml",
    "al-qasas",
    "al-ankabut",
    "ar-rum",
    "luqman",
    "as-sajdah",
    "al-ahzab",
    "saba",
    "fatir",
    "ya-sin",
    "as-saffat",
    "sad",
    "az-zumar",
    "ghafir",
    "fussilat",
    "ash-shuraa",
    "az-zukhruf",
    "ad-dukhan",
    "al-jathiyah",
    "al-ahqaf",
    "muhammad",
    "al-fath",
    "al-hujurat",
    "qaf",
    "adh-dhariyat",
    "at-tur",
    "an-najm",
    "al-qamar",
    "ar-rahman",
    "al-waqiah",
    "al-hadid",
    "al-mujadila",
    "al-hashr",
    "al-mumtahanah",
    "as-saf",
    "al-jumuah",
    "al-munafiqun",
    "at-taghabun",
    "at-talaq",
    "at-tahrim",
    "al-mulk",
    "al-qalam",
    "al-haqqah",
    "al-maarij",
    "nuh",
    "al-jinn",
    "al-muzzammil",
    "al-muddaththir",
    "al-qiyamah",
    "al-insan",
    "al-mursalat",
    "an-naba",
    "an-naziat",
    "abasa",
    "at-takwir",
    "al-infitar",
    "al-mutaffifin",
    "al-inshiqaq",
    "al-buruj",
    "at-tariq",
    "al-ala",
    "al-ghashiyah",
    "al-fajr",
    "al-balad",
    "ash-shams",
    "al-layl",
    "ad-duhaa",
    "ash-sharh",
    "at-tin",
    "al-alaq",
    "al-qadr",
    "al-bayyinah",
    "az-zalzalah",
    "al-adiyat",
    "al-qariah",
    "at-takathur",
    "al-asr",
    "al-humazah",
    "al-fil",
    "quraysh",
    "al-maun",
    "al-kawthar",
    "al-kafirun",
    "an-nasr",
    "al-masad",
    "al-ikhlas",
    "al-falaq",
    "an-nas",
)

_ALIASES: tuple[tuple[str, int], ...] = (
    ("fatihah", 1),
    ("fatiha", 1),
    ("al-fatiha", 1),
    ("baqarah", 2),
    ("baqara", 2),
    ("al-baqara", 2),
    ("al-imran", 3),
    ("aal-imran", 3),
    ("imran", 3),
    ("nisa", 4),
    ("maidah", 5),
    ("anam", 6),
    ("araf", 7),
    ("anfal", 8),
    ("tawbah", 9),
    ("taubah", 9),
    ("kahf", 18),
    ("ta-ha", 20),
    ("yasin", 36),
    ("yaseen", 36),
    ("rahman", 55),
    ("waqiah", 56),
    ("mulk", 67),
    ("kawthar", 108),
    ("kausar", 108),
    ("ikhlas", 112),
    ("falaq", 113),
    ("nas", 114),
)


def _build_table() -> Mapping[str, int]:
    table: dict[str, int] = {}
    for number, name in enumerate(_CANONICAL_NAMES, start=MIN_SURAH):
        table[name] = number
    for name, number in _ALIASES:
        if name in table:
            raise ValueError(f"Duplicate surah name in table: {name}")
        table[name] = number
    return MappingProxyType(table)


SURAH_NAMES: Mapping[str, int] = _build_table()


def get_surah_number(name: str) -> int | None:
    """
    Look up a surah number by name (case-insensitive).

    Args:
        name: Surah name such as "Al-Baqarah"

    Returns:
        Surah number, or None if the name is unknown
    """
    return SURAH_NAMES.get(name.strip().lower())


def get_surah_display_name(surah_number: int) -> str:
    """
    Get a presentable name for a surah number.

    Scans the name table for the first "al-" prefixed name of the surah and
    capitalizes each hyphen-separated part ("al-baqarah" -> "Al-Baqarah").
    Surahs with no such entry, including ones known only by other prefixes
    like "an-nisa" or "ya-sin", fall back to "Surah {n}".

    Args:
        surah_number: Surah number

    Returns:
        Display name, never raises
    """
    for name, number in SURAH_NAMES.items():
        if number == surah_number and name.startswith(DISPLAY_PREFIX):
            return "-".join(part[:1].upper() + part[1:] for part in name.split("-"))
    return f"Surah {surah_number}"
