"""Locale models for visitor locale resolution.

Defines the region tag value type and the shapes of the locale signals the
resolver consumes.
"""

import re
from dataclasses import dataclass
from typing import Optional, Protocol, Sequence

_LANGUAGE_RE = re.compile(r"^[A-Za-z]{2}$")
_REGION_RE = re.compile(r"^[A-Za-z]{2}$")


@dataclass(frozen=True)
class RegionTag:
    """Canonical ``ll`` or ``ll_RR`` locale identifier.

    The language part is always lowercase and the region part, when present,
    always uppercase. Frozen to ensure immutability and hashability for
    caching.

    Attributes:
        language: Two-letter ISO 639-1 language code (e.g., "en").
        region: Two-letter ISO 3166-1 country code (e.g., "GB"), or None.
    """

    language: str
    region: Optional[str] = None

    def __post_init__(self):
        if not _LANGUAGE_RE.match(self.language or ""):
            raise ValueError(f"Invalid language code: {self.language!r}")
        if self.region is not None and not _REGION_RE.match(self.region):
            raise ValueError(f"Invalid region code: {self.region!r}")
        object.__setattr__(self, "language", self.language.lower())
        if self.region is not None:
            object.__setattr__(self, "region", self.region.upper())

    def __str__(self) -> str:
        """Return the tag as used in Facebook SDK URLs.

        Returns:
            Tag string (e.g., "en_GB" or "en").
        """
        if self.region:
            return f"{self.language}_{self.region}"
        return self.language

    @classmethod
    def build(cls, language: str, region: Optional[str] = None) -> "RegionTag":
        """Create a RegionTag, normalising case and stripping whitespace.

        Args:
            language: Language code in any case.
            region: Region code in any case, or None.

        Returns:
            RegionTag instance.

        Raises:
            ValueError: If either part is not a two-letter code.
        """
        language = language.strip() if language else language
        region = region.strip() if region else None
        return cls(language=language, region=region or None)

    @classmethod
    def parse(cls, tag: str) -> "RegionTag":
        """Parse "en_GB", "en-gb" or "en" into a RegionTag.

        Args:
            tag: Tag string using "_" or "-" as separator.

        Returns:
            Parsed RegionTag.

        Raises:
            ValueError: If tag is not of the form ll or ll_RR.
        """
        if not isinstance(tag, str):
            raise ValueError(f"Region tag must be a string: {tag!r}")
        parts = re.split(r"[_-]", tag.strip())
        if len(parts) == 1:
            return cls.build(parts[0])
        if len(parts) == 2:
            return cls.build(parts[0], parts[1])
        raise ValueError(f"Invalid region tag: {tag!r}")

    def as_bcp47(self) -> str:
        """Return the tag with a hyphen separator (e.g., "en-GB")."""
        return str(self).replace("_", "-")


class LanguageEntry(Protocol):
    """A language spoken in a country."""

    def code_alpha2(self) -> Optional[str]: ...


class LocaleInfo(Protocol):
    """Country-level locale data.

    Language sequences are ordered by precedence; the first entry with a
    code wins.
    """

    def official_languages(self) -> Sequence[LanguageEntry]: ...

    def spoken_languages(self) -> Sequence[LanguageEntry]: ...

    def country_code(self) -> str: ...


@dataclass(frozen=True)
class LocaleSignals:
    """Raw locale signals detected for a visitor.

    Attributes:
        language_code: Detected language (e.g., "en"), if any.
        sub_region_code: Detected sub-language region (e.g., "us" for
            en-US), if any.
        locale: Country-level locale data for the visitor, if known.
    """

    language_code: Optional[str] = None
    sub_region_code: Optional[str] = None
    locale: Optional[LocaleInfo] = None


@dataclass(frozen=True)
class Language:
    """Plain LanguageEntry implementation."""

    code: Optional[str] = None

    def code_alpha2(self) -> Optional[str]:
        return self.code
