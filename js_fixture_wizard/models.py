"""Data models for the function tree artifact."""

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class Marker(Enum):
    """Placeholder values that must never be mistaken for a real fixture value."""

    AWAITING_INPUT = "awaiting_user_input"
    UNKNOWN = "$_unknown"
    UNDEFINED = "undefined"  # void result; omitted from JSON


@dataclass(frozen=True)
class FunctionRecord:
    """One discovered function signature and its recorded fixture."""

    name: str
    parameters: dict[str, str]  # {param_name: declared_type}
    declared_return: str
    normalized_return: str
    signature_hash: str
    test_inputs: dict[str, Any] = field(default_factory=dict)
    expected_result: Any = Marker.AWAITING_INPUT
    testable_properties: tuple[str, ...] = ()

    @property
    def signature(self) -> str:
        """Human-readable signature using the normalized return type."""
        params = ", ".join(f"{k}: {v}" for k, v in self.parameters.items())
        return f"{self.name}({params}) -> {self.normalized_return}"

    def to_dict(self) -> dict:
        """Convert to a JSON-ready dictionary.

        Keys use the artifact's camelCase names. Markers are written as
        their string values; an UNDEFINED result drops the expectedResult
        key entirely.
        """
        result = {
            "parameters": dict(self.parameters),
            "declaredReturn": self.declared_return,
            "normalizedReturn": self.normalized_return,
            "signatureHash": self.signature_hash,
            "testInputs": {
                k: _encode_value(v) for k, v in self.test_inputs.items()
            },
            "testableProperties": list(self.testable_properties),
        }
        if self.expected_result is not Marker.UNDEFINED:
            result["expectedResult"] = _encode_value(self.expected_result)
        return result

    @classmethod
    def from_dict(cls, name: str, data: dict) -> "FunctionRecord":
        """Rebuild a record from its persisted dictionary form.

        Raises:
            KeyError: If a required field is missing
            TypeError: If a field has the wrong shape
        """
        if "expectedResult" in data:
            expected = _decode_value(data["expectedResult"])
        else:
            expected = Marker.UNDEFINED

        return cls(
            name=name,
            parameters={str(k): str(v) for k, v in data["parameters"].items()},
            declared_return=str(data["declaredReturn"]),
            normalized_return=str(data["normalizedReturn"]),
            signature_hash=str(data["signatureHash"]),
            test_inputs={
                k: _decode_value(v) for k, v in data.get("testInputs", {}).items()
            },
            expected_result=expected,
            testable_properties=tuple(data.get("testableProperties", ())),
        )


# {relative_path: {function_name: FunctionRecord}}
FunctionTree = dict[str, dict[str, FunctionRecord]]


def _encode_value(value: Any) -> Any:
    if isinstance(value, Marker):
        return value.value
    return value


def _decode_value(value: Any) -> Any:
    if value == Marker.AWAITING_INPUT.value:
        return Marker.AWAITING_INPUT
    if value == Marker.UNKNOWN.value:
        return Marker.UNKNOWN
    return value


def tree_to_dict(tree: FunctionTree) -> dict:
    """Convert a function tree to nested dictionaries for JSON serialization."""
    return {
        path: {name: record.to_dict() for name, record in functions.items()}
        for path, functions in tree.items()
    }


def tree_from_dict(data: dict) -> FunctionTree:
    """Rebuild a function tree from its nested dictionary form."""
    return {
        path: {
            name: FunctionRecord.from_dict(name, record)
            for name, record in functions.items()
        }
        for path, functions in data.items()
    }


def tree_to_json(tree: FunctionTree, indent: int = 2) -> str:
    """Serialize a function tree to a JSON string."""
    return json.dumps(tree_to_dict(tree), indent=indent, allow_nan=False)
