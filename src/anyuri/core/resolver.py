"""
URI Resolution Engine
=====================
Derives alternate lexical forms of a URI.

A resolver turns one URI into an ordered list of zero or more URIs, each a
distinct resolved form of the input. Resolvers hold the factory they use to
parse lexical URIs, both for the input of resolve() and for every candidate
they produce.

Architecture:
- URIResolver: Protocol shared by all resolvers
- BaseResolver: Common resolve() on top of an abstract resolve_uri()
- CallbackResolver: Candidate generation supplied as a callable
- PatternResolver: Candidate generation driven by ordered rewrite rules
- resolve_default: Policy used by the factories' resolvers

Usage:
    resolver = PatternResolver(patterns={"/test/": "TEST"})
    [str(u) for u in resolver.resolve("urn:lousson:test")]
    -> ["urn:lousson:TEST", "urn:lousson:test"]
"""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Callable, List, Optional, Protocol, Sequence, Tuple

from anyuri.core.patterns import PatternRule, RuleTable, compile_rules
from anyuri.core.uri import GenericURI, URIPart

if TYPE_CHECKING:
    from anyuri.core.factory import URIFactory

logger = logging.getLogger(__name__)

ResolverCallback = Callable[[GenericURI], Sequence[GenericURI]]


class URIResolver(Protocol):
    """Protocol for URI resolvers."""

    def get_uri_factory(self) -> "URIFactory":
        """Return the factory used to parse lexical URIs."""
        ...

    def resolve(self, lexical: str) -> List[GenericURI]:
        """Parse and resolve a lexical URI."""
        ...

    def resolve_uri(self, uri: GenericURI) -> List[GenericURI]:
        """Resolve a URI value."""
        ...


class BaseResolver(ABC):
    """Base class for resolvers with common functionality."""

    @abstractmethod
    def get_uri_factory(self) -> "URIFactory":
        """Return the factory used to parse lexical URIs."""
        pass

    def resolve(self, lexical: str) -> List[GenericURI]:
        """
        Resolve a lexical URI.

        Raises:
            InvalidURIError: If lexical, or a candidate derived from it, is malformed
        """
        uri = self.get_uri_factory().get_uri(lexical)
        return self.resolve_uri(uri)

    @abstractmethod
    def resolve_uri(self, uri: GenericURI) -> List[GenericURI]:
        """Resolve a URI value into a list of zero or more URI values."""
        pass


class CallbackResolver(BaseResolver):
    """
    Resolver delegating resolve_uri() to a callable.

    Used to compose alternate policies without subclassing.
    """

    def __init__(self, factory: "URIFactory", callback: ResolverCallback):
        self.factory = factory
        self.callback = callback

    def get_uri_factory(self) -> "URIFactory":
        return self.factory

    def resolve_uri(self, uri: GenericURI) -> List[GenericURI]:
        return list(self.callback(uri))


class PatternResolver(BaseResolver):
    """
    Resolver applying ordered (pattern, replacement) rules.

    Every rule whose pattern matches the URI contributes one candidate: the
    URI with all matches replaced. Candidates come in rule order, and the
    original URI is always appended last.

    Rules are meant to be configured once, either through the constructor
    or set_patterns(), and read afterwards.
    """

    def __init__(
        self,
        factory: Optional["URIFactory"] = None,
        patterns: Optional[RuleTable] = None,
    ):
        if factory is None:
            from anyuri.core.factory import BuiltinURIFactory

            factory = BuiltinURIFactory()

        self.factory = factory
        self._rules: Tuple[PatternRule, ...] = ()
        if patterns is not None:
            self.set_patterns(patterns)

    def get_uri_factory(self) -> "URIFactory":
        return self.factory

    def set_patterns(self, patterns: RuleTable) -> None:
        """
        Replace the rule table.

        Args:
            patterns: Mapping of pattern -> replacement, or iterable of
                (pattern, replacement) pairs; order is preserved

        Raises:
            InvalidPatternError: If any pattern fails to compile
        """
        self._rules = compile_rules(patterns)
        logger.debug("Configured %d resolver pattern(s)", len(self._rules))

    def get_patterns(self) -> List[Tuple[str, str]]:
        """Return the configured (pattern, replacement) pairs in order."""
        return [(rule.pattern, rule.replacement) for rule in self._rules]

    def resolve_uri(self, uri: GenericURI) -> List[GenericURI]:
        """
        Resolve a URI against the rule table.

        Raises:
            InvalidURIError: If a rewritten candidate is not a valid URI
        """
        lexical = str(uri)
        factory = self.get_uri_factory()
        uri_list: List[GenericURI] = []

        for rule in self._rules:
            if rule.matches(lexical):
                candidate = rule.apply(lexical)
                logger.debug("Pattern %s rewrote %s to %s", rule.pattern, lexical, candidate)
                uri_list.append(factory.get_uri(candidate))

        uri_list.append(uri)
        return uri_list


def resolve_default(uri: GenericURI) -> List[GenericURI]:
    """
    Default resolution policy.

    URIs with the "urn" scheme (any case) are not resolvable and yield an
    empty list; any other URI resolves to itself.
    """
    if uri.get_part(URIPart.SCHEME).lower() == "urn":
        return []
    return [uri]
