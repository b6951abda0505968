"""
Request options for the forecast endpoint.

`Options` is a chainable builder over the query parameters DarkSky understands:

    options = Options().exclude([Block.MINUTELY, Block.FLAGS]).language(Language.ES).unit(Unit.SI)

Values are kept typed until `into_inner()` renders them into wire tokens for the
request formatter.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Type, TypeVar, Union


class Block(str, Enum):
    """A named section of the forecast response that can be excluded."""

    CURRENTLY = "currently"
    DAILY = "daily"
    FLAGS = "flags"
    HOURLY = "hourly"
    MINUTELY = "minutely"


class Language(str, Enum):
    """Language used for the `summary` fields of the response."""

    AR = "ar"
    AZ = "az"
    BE = "be"
    BS = "bs"
    CS = "cs"
    DE = "de"
    EL = "el"
    EN = "en"
    ES = "es"
    FR = "fr"
    HR = "hr"
    HU = "hu"
    ID = "id"
    IT = "it"
    IS = "is"
    KW = "kw"
    NB = "nb"
    NL = "nl"
    PL = "pl"
    PT = "pt"
    RU = "ru"
    SK = "sk"
    SR = "sr"
    SV = "sv"
    TET = "tet"
    TR = "tr"
    UK = "uk"
    X_PIG_LATIN = "x-pig-latin"
    ZH = "zh"
    ZH_TW = "zh-tw"


class Unit(str, Enum):
    """
    Unit system of the returned values.

    `US` (imperial) is what the API uses when no unit is requested. `CA` is SI with
    wind speed in km/h; `UK2` is SI with distances in miles and wind speed in mph.
    """

    AUTO = "auto"
    CA = "ca"
    SI = "si"
    UK2 = "uk2"
    US = "us"


EXCLUDE_KEY = "exclude"
EXTEND_KEY = "extend"
LANGUAGE_KEY = "lang"
UNITS_KEY = "units"
EXTEND_HOURLY = "hourly"

_E = TypeVar("_E", Block, Language, Unit)


def _coerce(enum_cls: Type[_E], value: Union[_E, str]) -> _E:
    """Accept either an enum member or its wire token."""
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(str(value).strip().lower())
    except ValueError as exc:
        allowed = ", ".join(member.value for member in enum_cls)
        raise ValueError(f"Unknown {enum_cls.__name__.lower()} '{value}'. Expected one of: {allowed}") from exc


@dataclass
class Options:
    """
    Optional query parameters for a forecast request.

    Attributes:
        excluded: Blocks to leave out of the response (None when not set).
        extend: Extension mode; only "hourly" exists.
        lang: Language for summaries.
        units: Unit system for values.
        extra: Additional raw parameters the library does not model. Keys that
            collide with a recognized option override the typed value.
    """
    excluded: Optional[List[Block]] = None
    extend: Optional[str] = None
    lang: Optional[Language] = None
    units: Optional[Unit] = None
    extra: Dict[str, str] = field(default_factory=dict)

    def exclude(self, blocks: Iterable[Union[Block, str]]) -> "Options":
        """Replace the list of excluded blocks. An empty list still sends `exclude=`."""
        self.excluded = [_coerce(Block, block) for block in blocks]
        return self

    def extend_hourly(self) -> "Options":
        """Extend the hourly block to seven days instead of two."""
        self.extend = EXTEND_HOURLY
        return self

    def language(self, language: Union[Language, str]) -> "Options":
        self.lang = _coerce(Language, language)
        return self

    def unit(self, unit: Union[Unit, str]) -> "Options":
        self.units = _coerce(Unit, unit)
        return self

    def get_mut(self) -> Dict[str, str]:
        """
        Return the mutable mapping of raw extra parameters.

        Values are sent verbatim; the formatter does not percent-encode them.
        """
        return self.extra

    def get_ref(self) -> Mapping[str, str]:
        """Return a read-only view of the rendered query parameters."""
        return MappingProxyType(self.into_inner())

    def into_inner(self) -> Dict[str, str]:
        """Render the options into wire tokens, in a stable order."""
        params: Dict[str, str] = {}
        if self.excluded is not None:
            params[EXCLUDE_KEY] = ",".join(block.value for block in self.excluded)
        if self.extend is not None:
            params[EXTEND_KEY] = self.extend
        if self.lang is not None:
            params[LANGUAGE_KEY] = self.lang.value
        if self.units is not None:
            params[UNITS_KEY] = self.units.value
        for key, value in self.extra.items():
            params[str(key)] = str(value)
        return params


__all__ = [
    "Block",
    "Language",
    "Unit",
    "Options",
    "EXCLUDE_KEY",
    "EXTEND_KEY",
    "LANGUAGE_KEY",
    "UNITS_KEY",
]
