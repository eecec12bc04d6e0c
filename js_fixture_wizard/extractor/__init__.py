"""Regex-based function signature extraction."""

from js_fixture_wizard.extractor.patterns import PATTERNS, SignaturePattern
from js_fixture_wizard.extractor.signature_parser import (
    extract_functions,
    is_valid_function_name,
    normalize_return_type,
    parse_parameters,
)

__all__ = [
    # Pattern table
    "PATTERNS",
    "SignaturePattern",
    # Extraction
    "extract_functions",
    "is_valid_function_name",
    "normalize_return_type",
    "parse_parameters",
]
