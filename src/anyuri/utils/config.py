"""
anyuri Configuration Loader.

Loads resolver configuration from .anyuri/config.yaml.
"""

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import yaml

from anyuri.core.factory import BaseURIFactory, BuiltinURIFactory, GenericURIFactory
from anyuri.core.resolver import PatternResolver
from anyuri.errors import ConfigError

logger = logging.getLogger(__name__)

FACTORIES = {
    "builtin": BuiltinURIFactory,
    "generic": GenericURIFactory,
}


def _as_text(value: Any) -> str:
    # an empty YAML value loads as None
    return "" if value is None else str(value)


def config_path(repo_root: Path) -> Path:
    return repo_root / ".anyuri" / "config.yaml"


def find_config(start: Optional[Path] = None) -> Optional[Path]:
    """
    Search start (default: cwd) and each of its parents, up to and
    including the filesystem root, for .anyuri/config.yaml.

    Returns:
        Path of the first config file found, or None
    """
    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = config_path(directory)
        if candidate.is_file():
            logger.debug("Found config at %s", candidate)
            return candidate
    return None


def find_project_root(start: Optional[Path] = None) -> Path:
    """Directory holding the nearest .anyuri/config.yaml, else start itself."""
    found = find_config(start)
    if found is not None:
        return found.parent.parent
    return (start or Path.cwd()).resolve()


def load_anyuri_config(repo_root: Path) -> Dict[str, Any]:
    """
    Load .anyuri/config.yaml configuration file.

    Args:
        repo_root: Project root path

    Returns:
        Parsed configuration dict, or empty dict if file doesn't exist

    Raises:
        ConfigError: If the file is not valid YAML or not a mapping

    Example config:
        resolver:
          factory: builtin
          patterns:
            "/test/": TEST
            "/foo:(baz)/": "foo:bar:$1"
    """
    path = config_path(repo_root)

    if not path.exists():
        logger.debug("No config at %s", path)
        return {}

    try:
        with open(path, encoding="utf-8") as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ConfigError(f"Expected a mapping at top level of {path}")
    return config


def get_resolver_config(repo_root: Path) -> Dict[str, Any]:
    """
    Get resolver-specific configuration.

    Args:
        repo_root: Project root path

    Returns:
        Resolver configuration dict with defaults applied
    """
    config = load_anyuri_config(repo_root)
    resolver_config = config.get("resolver") or {}
    if not isinstance(resolver_config, dict):
        raise ConfigError("The 'resolver' section must be a mapping")

    defaults = {
        "factory": "builtin",
        "patterns": [],
    }

    for key, default_value in defaults.items():
        if key not in resolver_config:
            resolver_config[key] = default_value

    return resolver_config


def load_patterns(repo_root: Path) -> List[Tuple[str, str]]:
    """
    Get the configured resolver rules in order.

    Rules may be written as a mapping of pattern to replacement, or as a
    list of {pattern, replacement} entries:

        patterns:
          - pattern: "/test/"
            replacement: TEST

    Raises:
        ConfigError: If an entry lacks a pattern or replacement
    """
    patterns = get_resolver_config(repo_root)["patterns"] or []

    if isinstance(patterns, dict):
        return [(_as_text(k), _as_text(v)) for k, v in patterns.items()]

    if not isinstance(patterns, list):
        raise ConfigError("resolver.patterns must be a mapping or a list")

    rules = []
    for index, entry in enumerate(patterns):
        if not isinstance(entry, dict) or "pattern" not in entry or "replacement" not in entry:
            raise ConfigError(
                f"resolver.patterns[{index}] must have 'pattern' and 'replacement' keys"
            )
        rules.append((_as_text(entry["pattern"]), _as_text(entry["replacement"])))

    return rules


def get_factory(repo_root: Path) -> BaseURIFactory:
    """Instantiate the configured factory."""
    name = get_resolver_config(repo_root)["factory"]
    factory_class = FACTORIES.get(name)
    if factory_class is None:
        raise ConfigError(
            f"Unknown factory '{name}' (expected one of: {', '.join(sorted(FACTORIES))})"
        )
    return factory_class()


def build_resolver(repo_root: Path) -> PatternResolver:
    """
    Build a PatternResolver from .anyuri/config.yaml.

    Raises:
        ConfigError: If the configuration is malformed
        InvalidPatternError: If a configured pattern does not compile
    """
    resolver = PatternResolver(get_factory(repo_root), load_patterns(repo_root))
    logger.debug("Built resolver from %s", config_path(repo_root))
    return resolver
