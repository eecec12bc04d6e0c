"""Coerce free-text operator answers into typed fixture values."""

import json
import logging
import math
import re
from typing import Any

logger = logging.getLogger(__name__)

INTEGER_PATTERN = re.compile(r"^[-+]?\d+$")
NUMBER_PATTERN = re.compile(r"^[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?$")


def _parse_number(value: str) -> int | float | None:
    text = value.strip()
    try:
        if INTEGER_PATTERN.match(text):
            return int(text)
        if NUMBER_PATTERN.match(text):
            number = float(text)
            # inf has no JSON representation
            return number if math.isfinite(number) else None
    except ValueError as e:
        logger.info(f"Numeric input out of range, keeping raw text: {e}")
    return None


def _parse_boolean(value: str, ignore_case: bool = True) -> bool | None:
    if ignore_case:
        value = value.lower()
    if value == "true":
        return True
    if value == "false":
        return False
    return None


def _reject_constant(name: str):
    raise ValueError(f"{name} is not valid JSON")


def _finite_float(text: str) -> float:
    number = float(text)
    if not math.isfinite(number):
        raise ValueError(f"{text} is out of range")
    return number


def _load_json(value: str) -> Any:
    """Parse strict JSON; NaN, Infinity and overflowing floats are rejected."""
    return json.loads(value, parse_constant=_reject_constant, parse_float=_finite_float)


def coerce_value(value: str, target_type: str) -> Any:
    """Convert operator input to the type a parameter or result declares.

    Never raises: unparseable input falls back to the raw string (or a
    naive comma split for array types).

    Args:
        value: Text the operator entered
        target_type: Declared or inferred type name, e.g. "number[]"

    Returns:
        The coerced value
    """
    normalized_type = target_type.lower().strip()

    if "[]" in normalized_type:
        return _coerce_array(value, normalized_type)

    if "|" in normalized_type:
        first_type = normalized_type.split("|")[0].strip().replace("'", "").replace('"', "")
        return coerce_value(value, first_type)

    if normalized_type == "string":
        return value

    if normalized_type == "number":
        number = _parse_number(value)
        return value if number is None else number

    if normalized_type == "boolean":
        boolean = _parse_boolean(value)
        return value if boolean is None else boolean

    if normalized_type in ("any", "unknown"):
        # Only the exact lowercase literals count as booleans here
        boolean = _parse_boolean(value, ignore_case=False)
        if boolean is not None:
            return boolean
        number = _parse_number(value)
        return value if number is None else number

    if value.startswith(("{", "[")):
        try:
            return _load_json(value)
        except ValueError:
            logger.info(f"Input for {target_type} is not valid JSON, keeping raw text")
    return value


def _coerce_array(value: str, normalized_type: str) -> list:
    element_type = normalized_type.replace("[]", "", 1)
    if value.startswith("[") and value.endswith("]"):
        try:
            return _load_json(value)
        except ValueError:
            logger.info("Array input is not valid JSON, splitting on commas")
            return [item.strip() for item in value.split(",")]

    return [coerce_value(item.strip(), element_type) for item in value.split(",")]
