from anyuri.core.uri import GenericURI, URIPart
from anyuri.core.parser import URIParser, parse_uri, parse_uri_scheme
from anyuri.core.scheme import GenericURIScheme, SchemeNameType
from anyuri.core.registry import SCHEME_REGISTRY, lookup_scheme
from anyuri.core.patterns import PatternRule, compile_pattern, compile_rules
from anyuri.core.resolver import (
    BaseResolver,
    CallbackResolver,
    PatternResolver,
    URIResolver,
    resolve_default,
)
from anyuri.core.factory import (
    BaseURIFactory,
    BuiltinURIFactory,
    GenericURIFactory,
    URIFactory,
)

__all__ = [
    "GenericURI",
    "URIPart",
    "URIParser",
    "parse_uri",
    "parse_uri_scheme",
    "GenericURIScheme",
    "SchemeNameType",
    "SCHEME_REGISTRY",
    "lookup_scheme",
    "PatternRule",
    "compile_pattern",
    "compile_rules",
    "BaseResolver",
    "CallbackResolver",
    "PatternResolver",
    "URIResolver",
    "resolve_default",
    "BaseURIFactory",
    "BuiltinURIFactory",
    "GenericURIFactory",
    "URIFactory",
]
