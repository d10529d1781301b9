"""
Exception types raised by anyuri.

Every failure surfaced by the parser, the factories and the resolvers is an
InvalidURIError. Configuration and rule problems get their own types so that
callers can tell bad input apart from a bad setup.
"""


class AnyURIError(Exception):
    """Base class for all anyuri errors."""


class InvalidURIError(AnyURIError, ValueError):
    """Raised when a URI or URI scheme is malformed or lacks a scheme."""


class InvalidPatternError(AnyURIError, ValueError):
    """Raised when a resolver rule is not a valid delimited expression."""


class ConfigError(AnyURIError):
    """Raised when .anyuri/config.yaml exists but cannot be used."""
