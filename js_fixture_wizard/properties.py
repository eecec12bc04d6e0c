"""Map return types to the aspects a test suite should probe."""

PROPERTY_TABLE = [
    ("void", ("side_effects", "state_changes", "external_calls")),
    ("boolean", ("truthiness", "edge_cases")),
    ("number", ("range", "precision", "edge_cases")),
    ("string", ("length", "format", "content")),
]

PROMISE_PROPERTIES = ("async_behavior", "timeout", "error_handling")


def _awaited_type(return_type: str) -> str:
    if return_type.startswith("Promise<") and return_type.endswith(">"):
        return return_type[len("Promise<") : -1].strip()
    return return_type


def generate_testable_properties(return_type: str) -> tuple[str, ...]:
    """Build the testable-property tags for a return type.

    A scalar category applies when the return type is the scalar itself or a
    Promise of it; the Promise tags apply to any type mentioning Promise.
    Categories are checked independently and unioned in table order.

    Args:
        return_type: Normalized (or inferred) return type

    Returns:
        Ordered tags without duplicates; empty for unrecognized types
    """
    awaited = _awaited_type(return_type)
    tags: list[str] = []

    for scalar, scalar_tags in PROPERTY_TABLE:
        if scalar in (return_type, awaited):
            tags.extend(scalar_tags)

    if "Promise" in return_type:
        tags.extend(PROMISE_PROPERTIES)

    return tuple(dict.fromkeys(tags))
