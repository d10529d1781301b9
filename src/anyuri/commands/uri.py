"""
URI CLI Command
===============
Provides CLI interface for parsing, scheme lookup and resolution.

Commands:
- parse: Show the parts of a URI
- scheme: Show the names of a URI scheme
- resolve: Resolve a URI with the configured rules
- patterns: List the configured rules

Usage:
    anyuri parse "http://user@example.com:8080/"
    anyuri scheme https --format json
    anyuri resolve urn:lousson:test
    anyuri resolve urn:lousson:test --pattern "/test/" TEST
    anyuri resolve http://example.com/ --default
    anyuri patterns
"""
from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from anyuri.core.scheme import SchemeNameType
from anyuri.core.uri import GenericURI
from anyuri.errors import AnyURIError
from anyuri.utils.config import build_resolver, find_project_root, get_factory


class URICommand:
    """
    CLI command handler for URI operations.

    Each method prints its result and returns an exit code.
    """

    def __init__(self, repo_root: Optional[Path] = None):
        self.repo_root = repo_root or find_project_root()

    def parse(self, uri: str, format: str = "text") -> int:
        """
        Print the parts of a URI.

        Returns:
            Exit code (0 if the URI is valid, 1 if not)
        """
        try:
            parsed = get_factory(self.repo_root).get_uri(uri)
        except AnyURIError as e:
            print(f"Error parsing URI: {e}", file=sys.stderr)
            return 1

        if format == "json":
            print(json.dumps({"uri": str(parsed), "parts": parsed.to_dict()}, indent=2))
        else:
            print(f"URI: {parsed}")
            for name, value in parsed.to_dict().items():
                print(f"  {name}: {value}")

        return 0

    def scheme(self, name: str, format: str = "text") -> int:
        """
        Print the mnemonic, abbreviation and English name of a scheme.

        Returns:
            Exit code (0 if the scheme is valid, 1 if not)
        """
        try:
            scheme = get_factory(self.repo_root).get_uri_scheme(name)
        except AnyURIError as e:
            print(f"Error reading scheme: {e}", file=sys.stderr)
            return 1

        names = {
            "mnemonic": scheme.get_name(SchemeNameType.MNEMONIC),
            "abbreviation": scheme.get_name(SchemeNameType.ABBREVIATION),
            "english": scheme.get_name(SchemeNameType.ENGLISH),
        }

        if format == "json":
            print(json.dumps(names, indent=2))
        else:
            for key, value in names.items():
                print(f"{key.capitalize()}: {value}")

        return 0

    def resolve(
        self,
        uri: str,
        patterns: Optional[Sequence[Tuple[str, str]]] = None,
        default: bool = False,
        format: str = "text",
    ) -> int:
        """
        Resolve a URI.

        Args:
            uri: The URI to resolve
            patterns: Extra (pattern, replacement) rules, applied after the
                configured ones
            default: Use the factory's default resolver instead of rules
            format: Output format - "text" or "json"

        Returns:
            Exit code (0 if at least one URI was produced, 1 otherwise)
        """
        if default and patterns:
            print("Error: rewrite rules cannot be combined with --default", file=sys.stderr)
            return 1

        try:
            if default:
                resolver = get_factory(self.repo_root).get_uri_resolver()
            else:
                resolver = build_resolver(self.repo_root)
                if patterns:
                    resolver.set_patterns(resolver.get_patterns() + list(patterns))
            resolved: List[GenericURI] = resolver.resolve(uri)
        except AnyURIError as e:
            print(f"Error resolving URI: {e}", file=sys.stderr)
            return 1

        if format == "json":
            print(json.dumps({"uri": uri, "resolved": [str(u) for u in resolved]}, indent=2))
        else:
            print(f"URI: {uri}")
            if resolved:
                print("Resolved to:")
                for item in resolved:
                    print(f"  - {item}")
            else:
                print("Not resolvable")

        return 0 if resolved else 1

    def patterns(self) -> int:
        """
        List the configured rules in the order they are applied.

        Returns:
            Exit code (0 on success, 1 if the configuration is invalid)
        """
        try:
            rules = build_resolver(self.repo_root).get_patterns()
        except AnyURIError as e:
            print(f"Error loading patterns: {e}", file=sys.stderr)
            return 1

        if not rules:
            print("No patterns configured.")
            return 0

        for index, (pattern, replacement) in enumerate(rules, 1):
            print(f"{index}. {pattern} -> {replacement}")
        return 0
