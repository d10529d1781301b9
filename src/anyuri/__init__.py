"""
anyuri - RFC 3986 URI parsing, scheme metadata and pattern-based resolution.

Usage:
    import anyuri

    uri = anyuri.get_uri("http://example.com:8080/")
    uri.get_part(anyuri.URIPart.AUTHORITY)              # "example.com:8080"
    anyuri.get_uri_scheme("http").get_name(anyuri.SchemeNameType.ENGLISH)
    anyuri.get_uri_resolver().resolve("urn:lousson:example")   # []
"""
from anyuri.core import (
    BuiltinURIFactory,
    CallbackResolver,
    GenericURI,
    GenericURIFactory,
    GenericURIScheme,
    PatternResolver,
    SchemeNameType,
    URIPart,
)
from anyuri.errors import AnyURIError, ConfigError, InvalidPatternError, InvalidURIError

__version__ = "0.1.0"

_factory = BuiltinURIFactory()


def get_uri(lexical: str) -> GenericURI:
    """Create a URI value using the builtin factory."""
    return _factory.get_uri(lexical)


def get_uri_scheme(name: str) -> GenericURIScheme:
    """Create a scheme value using the builtin factory."""
    return _factory.get_uri_scheme(name)


def get_uri_resolver() -> CallbackResolver:
    """Return the builtin factory's default resolver."""
    return _factory.get_uri_resolver()


__all__ = [
    "AnyURIError",
    "BuiltinURIFactory",
    "CallbackResolver",
    "ConfigError",
    "GenericURI",
    "GenericURIFactory",
    "GenericURIScheme",
    "InvalidPatternError",
    "InvalidURIError",
    "PatternResolver",
    "SchemeNameType",
    "URIPart",
    "get_uri",
    "get_uri_resolver",
    "get_uri_scheme",
]
