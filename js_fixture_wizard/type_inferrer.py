"""Infer coarse return types for functions without a useful annotation."""

import logging

from js_fixture_wizard.models import FunctionRecord

logger = logging.getLogger(__name__)

# Rules ordered by precedence (first match wins)
INFERENCE_RULES = [
    {"keywords": ("server", "port"), "type": "void"},
    {"keywords": ("get", "fetch", "query"), "type": "Promise<any>"},
    {"keywords": ("set", "update", "save"), "type": "boolean"},
    {"keywords": ("validate", "check", "is"), "type": "boolean"},
    {"keywords": ("format", "transform", "convert"), "type": "string"},
    {"keywords": ("calculate", "compute", "math"), "type": "number"},
]

FALLBACK_TYPE = "any"


def needs_inference(record: FunctionRecord) -> bool:
    """Check whether the record's return type is missing or ``any``."""
    return not record.normalized_return or record.normalized_return == "any"


def build_context(file_path: str, record: FunctionRecord) -> str:
    """Build the lower-cased text the inference keywords are matched against.

    The context holds the file path, the parameter names and the current
    return type. The function name itself is not part of it.
    """
    param_names = " ".join(record.parameters)
    return f"{file_path} {param_names} {record.normalized_return}".lower()


def infer_return_type(file_path: str, record: FunctionRecord) -> str:
    """Guess a return type from keywords in the function's context.

    This is a heuristic that seeds a default the operator can override; wrong
    guesses are expected.

    Args:
        file_path: Path of the file relative to the scan root
        record: The function to classify

    Returns:
        One of void, Promise<any>, boolean, string, number or any
    """
    context = build_context(file_path, record)

    for rule in INFERENCE_RULES:
        for keyword in rule["keywords"]:
            if keyword in context:
                logger.info(
                    f"Inferred '{rule['type']}' for {record.name} "
                    f"from keyword '{keyword}'"
                )
                return rule["type"]

    logger.info(f"No inference rule matched {record.name}")
    return FALLBACK_TYPE
