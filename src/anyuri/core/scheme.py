"""
URI Scheme Values
=================
Immutable representation of a URI scheme and its three name variants.

Name variants:
- MNEMONIC:     lower-case token used as URI prefix, e.g. "http"
- ABBREVIATION: short display form, e.g. "HTTP"
- ENGLISH:      descriptive name, e.g. "Hypertext Transfer Protocol"
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional

from anyuri.core.parser import URIParser


class SchemeNameType(IntEnum):
    """Selects which name variant GenericURIScheme.get_name() returns."""

    MNEMONIC = 0
    ABBREVIATION = 1
    ENGLISH = 2


@dataclass(frozen=True)
class GenericURIScheme:
    """
    A URI scheme.

    Attributes:
        mnemonic: Canonical lower-case scheme token
        abbreviation: Short display name
        english_name: Descriptive English name
    """

    mnemonic: str
    abbreviation: str
    english_name: str

    @classmethod
    def create(
        cls,
        scheme: str,
        abbreviation: Optional[str] = None,
        name: Optional[str] = None,
    ) -> "GenericURIScheme":
        """
        Create a scheme value from a scheme name (or a URI).

        Args:
            scheme: Scheme name or URI to take the mnemonic from
            abbreviation: Defaults to the upper-cased mnemonic
            name: English name, defaults to the abbreviation

        Raises:
            InvalidURIError: If the scheme is absent or malformed

        Example:
            GenericURIScheme.create("Example").get_name(SchemeNameType.ENGLISH) -> "EXAMPLE"
        """
        mnemonic = URIParser.parse_uri_scheme(scheme)

        if abbreviation is None:
            abbreviation = mnemonic.upper()
        if name is None:
            name = abbreviation

        return cls(mnemonic=mnemonic, abbreviation=abbreviation, english_name=name)

    def get_name(self, name_type: SchemeNameType = SchemeNameType.MNEMONIC) -> str:
        """
        Return one of the scheme's names.

        Raises:
            ValueError: If name_type is not a SchemeNameType value
        """
        name_type = SchemeNameType(name_type)
        if name_type is SchemeNameType.ABBREVIATION:
            return self.abbreviation
        if name_type is SchemeNameType.ENGLISH:
            return self.english_name
        return self.mnemonic

    def __str__(self) -> str:
        return self.mnemonic
