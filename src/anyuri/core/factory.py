"""
URI Factories
=============
Entry points for creating URI values, scheme values and resolvers.

- GenericURIFactory: schemes always get default names
- BuiltinURIFactory: schemes are looked up in the builtin registry first

Both hand out a CallbackResolver running resolve_default() from
get_uri_resolver().
"""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Mapping, Optional, Protocol, Tuple

from anyuri.core.parser import URIParser
from anyuri.core.registry import SCHEME_REGISTRY, lookup_scheme
from anyuri.core.resolver import CallbackResolver, URIResolver, resolve_default
from anyuri.core.scheme import GenericURIScheme
from anyuri.core.uri import GenericURI

logger = logging.getLogger(__name__)


class URIFactory(Protocol):
    """Protocol for URI factories."""

    def get_uri(self, lexical: str) -> GenericURI:
        ...

    def get_uri_scheme(self, name: str) -> GenericURIScheme:
        ...

    def get_uri_resolver(self) -> URIResolver:
        ...


class BaseURIFactory(ABC):
    """Base class for URI factories."""

    def get_uri(self, lexical: str) -> GenericURI:
        """
        Create a URI value from its lexical form.

        Raises:
            InvalidURIError: If the URI is malformed
        """
        return GenericURI.create(lexical)

    @abstractmethod
    def get_uri_scheme(self, name: str) -> GenericURIScheme:
        """
        Create a scheme value for a scheme name (or URI).

        Raises:
            InvalidURIError: If the scheme name is malformed
        """
        pass

    def get_uri_resolver(self) -> URIResolver:
        """Return a resolver applying the default resolution policy."""
        return CallbackResolver(self, resolve_default)


class GenericURIFactory(BaseURIFactory):
    """Factory without scheme metadata."""

    def get_uri_scheme(self, name: str) -> GenericURIScheme:
        return GenericURIScheme.create(name)


class BuiltinURIFactory(BaseURIFactory):
    """Factory consulting a register of scheme information."""

    def __init__(self, schemes: Optional[Mapping[str, Tuple[str, str]]] = None):
        self.schemes = SCHEME_REGISTRY if schemes is None else schemes

    def get_uri_scheme(self, name: str) -> GenericURIScheme:
        mnemonic = URIParser.parse_uri_scheme(name)

        abbreviation = english = None
        info = lookup_scheme(mnemonic, self.schemes)
        if info is not None:
            abbreviation, english = info
        else:
            logger.debug("No registered metadata for scheme %r", mnemonic)

        return GenericURIScheme.create(mnemonic, abbreviation, english)
