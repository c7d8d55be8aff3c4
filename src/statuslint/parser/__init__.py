"""YAML parsing with line fidelity and field path resolution."""

from statuslint.parser.loader import DocumentLoader, ParsedDocument, YAMLSafetyError
from statuslint.parser.path import FieldPath, PathSegment, parse_field_path
from statuslint.parser.resolver import PositionResolver

__all__ = [
    "DocumentLoader",
    "FieldPath",
    "ParsedDocument",
    "PathSegment",
    "PositionResolver",
    "YAMLSafetyError",
    "parse_field_path",
]
