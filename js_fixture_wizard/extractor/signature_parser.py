"""Extract function signatures from JavaScript/TypeScript source text."""

import logging
import re

from js_fixture_wizard.extractor.patterns import PATTERNS, SignaturePattern
from js_fixture_wizard.hasher import signature_hash
from js_fixture_wizard.models import FunctionRecord, Marker

logger = logging.getLogger(__name__)

# Keywords that the method patterns pick up from `if (...) {` and friends
INVALID_NAMES = frozenset(
    {"if", "for", "while", "switch", "catch", "return", "throw", "try", "else"}
)

IDENTIFIER_PATTERN = re.compile(r"^[a-zA-Z_$][a-zA-Z0-9_$]*$")

WHITESPACE_PATTERN = re.compile(r"\s+")


def is_valid_function_name(name: str) -> bool:
    """Check that a captured name is an identifier and not a keyword."""
    return name not in INVALID_NAMES and bool(IDENTIFIER_PATTERN.match(name))


def parse_parameters(params: str) -> dict[str, str]:
    """Parse a raw parameter list into {name: type}.

    Splits on every comma, so generic types such as Map<K, V> are not kept
    intact. Untyped parameters map to "any".

    Args:
        params: Text between the parentheses of a signature

    Returns:
        Ordered mapping of parameter name to declared type
    """
    args: dict[str, str] = {}
    if not params.strip():
        return args

    for param in params.split(","):
        param = param.strip()
        if not param:
            continue
        name, _, type_text = param.partition(":")
        name = name.strip()
        if name:
            args[name] = type_text.strip() or "any"

    return args


def normalize_return_type(return_type: str) -> str:
    """Collapse whitespace and drop anything from the first brace on."""
    if not return_type or return_type == "any":
        return "any"

    normalized = WHITESPACE_PATTERN.sub(" ", return_type)
    normalized = normalized.split("{", 1)[0].strip()
    return normalized or "any"


def extract_functions(
    content: str,
    patterns: tuple[SignaturePattern, ...] = PATTERNS,
) -> dict[str, FunctionRecord]:
    """Extract every function signature found in a source file.

    Patterns are applied in order and each one scans the whole text. The
    first valid capture of a name wins; later matches for the same name are
    ignored.

    Args:
        content: Source file text
        patterns: Ordered pattern table to apply

    Returns:
        Mapping of function name to a FunctionRecord awaiting test input
    """
    functions: dict[str, FunctionRecord] = {}

    for pattern in patterns:
        for match in pattern.regex.finditer(content):
            name = match.group("name")
            if not name or name in functions or not is_valid_function_name(name):
                continue

            params_text = match.group("params") or ""
            declared = match.group("returns") if pattern.has_return else "any"
            declared = (declared or "").strip()

            parameters = parse_parameters(params_text)
            functions[name] = FunctionRecord(
                name=name,
                parameters=parameters,
                declared_return=declared,
                normalized_return=normalize_return_type(declared),
                signature_hash=signature_hash(name, parameters, declared),
                test_inputs={arg: Marker.AWAITING_INPUT for arg in parameters},
                expected_result=Marker.AWAITING_INPUT,
            )
            logger.debug(f"Matched {pattern.category} function: {name}")

    return functions
