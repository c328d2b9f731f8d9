from collections.abc import Iterable

from browserscan.api.modules.scan.schema import ConsistencyCheck
from browserscan.api.modules.scan.services.core import clean_text, create_check

COUNTRY_LANGUAGES: dict[str, tuple[str, ...]] = {
    "US": ("en",),
    "GB": ("en",),
    "CA": ("en", "fr"),
    "AU": ("en",),
    "DE": ("de",),
    "FR": ("fr",),
    "JP": ("ja",),
    "CN": ("zh",),
    "TW": ("zh",),
    "HK": ("zh", "en"),
    "KR": ("ko",),
    "ES": ("es",),
    "MX": ("es",),
    "BR": ("pt",),
    "PT": ("pt",),
    "IT": ("it",),
    "NL": ("nl",),
    "RU": ("ru",),
    "IN": ("en", "hi"),
    "AR": ("es",),
    "SE": ("sv",),
    "NO": ("no", "nb"),
    "DK": ("da",),
    "FI": ("fi",),
    "PL": ("pl",),
    "TR": ("tr",),
    "IL": ("he", "en"),
    "AE": ("ar", "en"),
    "SA": ("ar",),
    "TH": ("th",),
    "VN": ("vi",),
    "ID": ("id",),
    "MY": ("ms", "en"),
    "PH": ("en", "fil"),
    "UA": ("uk", "ru"),
    "CZ": ("cs",),
    "GR": ("el",),
}

# Countries where English is the expected primary language, not a soft signal.
ENGLISH_HOME_COUNTRIES = frozenset({"US", "GB"})


def language_base(language: str) -> str:
    return language.split("-", 1)[0].strip().lower()


def expected_languages(country_code: str) -> tuple[str, ...]:
    return COUNTRY_LANGUAGES.get(country_code.upper(), ())


def _clean_languages(languages: object) -> list[str]:
    if isinstance(languages, str) or not isinstance(languages, Iterable):
        return []
    return [item for item in (clean_text(lang) for lang in languages) if item]


def check_language(ip_country_code: object, languages: object) -> ConsistencyCheck:
    langs = _clean_languages(languages)
    if not langs:
        return create_check("WARN", "No language data available")

    country = clean_text(ip_country_code).upper()
    expected = expected_languages(country)
    expected_label = "/".join(expected) or "unknown"
    primary = language_base(langs[0])

    if primary in expected:
        return create_check(
            "PASS",
            f"Language ({primary}) matches IP country ({country})",
        )

    if any(language_base(lang) in expected for lang in langs):
        return create_check(
            "WARN",
            f"Primary language ({primary}) differs from expected ({expected_label}),"
            " but secondary match found",
        )

    if primary == "en" and country not in ENGLISH_HOME_COUNTRIES:
        return create_check(
            "WARN",
            f"IP country is {country or 'unknown'} but browser language is English",
        )

    return create_check(
        "FAIL",
        f"Language mismatch: IP ({country or 'unknown'}) expects {expected_label},"
        f" got {primary}",
    )


__all__ = (
    "COUNTRY_LANGUAGES",
    "check_language",
    "expected_languages",
    "language_base",
)
