"""
Shared fixtures for anyuri tests.
"""
import pytest

from anyuri.core.factory import BuiltinURIFactory, GenericURIFactory
from anyuri.core.resolver import PatternResolver


SAMPLE_PATTERNS = {
    "/test/": "TEST",
    "/foo:(baz)/": "foo:bar:$1",
}


@pytest.fixture
def factory():
    """Builtin factory with the scheme registry."""
    return BuiltinURIFactory()


@pytest.fixture
def generic_factory():
    """Factory without scheme metadata."""
    return GenericURIFactory()


@pytest.fixture
def default_resolver(factory):
    """The factory's default (urn-unresolvable) resolver."""
    return factory.get_uri_resolver()


@pytest.fixture
def pattern_resolver(factory):
    """Pattern resolver configured with SAMPLE_PATTERNS."""
    return PatternResolver(factory, SAMPLE_PATTERNS)


@pytest.fixture
def write_config(tmp_path):
    """Write .anyuri/config.yaml under tmp_path and return the project root."""

    def _write(content: str):
        config_dir = tmp_path / ".anyuri"
        config_dir.mkdir(exist_ok=True)
        (config_dir / "config.yaml").write_text(content, encoding="utf-8")
        return tmp_path

    return _write
