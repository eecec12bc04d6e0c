"""Tests for data models."""

import json

import pytest

from js_fixture_wizard.models import (
    FunctionRecord,
    Marker,
    tree_from_dict,
    tree_to_json,
)


class TestFunctionRecord:
    def given_record(self, **overrides):
        fields = dict(
            name="add",
            parameters={"a": "number", "b": "number"},
            declared_return="number",
            normalized_return="number",
            signature_hash="0f1e2d3c",
            test_inputs={"a": 1, "b": Marker.AWAITING_INPUT},
            expected_result=Marker.AWAITING_INPUT,
            testable_properties=("range", "precision", "edge_cases"),
        )
        fields.update(overrides)
        self.record = FunctionRecord(**fields)

    def when_serialized(self):
        self.data = self.record.to_dict()

    def test_signature_uses_normalized_return(self):
        self.given_record(declared_return="any", normalized_return="void")
        assert self.record.signature == "add(a: number, b: number) -> void"

    def test_markers_serialize_as_strings(self):
        """Markers become their persisted string values."""
        self.given_record()
        self.when_serialized()
        assert self.data["testInputs"] == {"a": 1, "b": "awaiting_user_input"}
        assert self.data["expectedResult"] == "awaiting_user_input"
        assert self.data["testableProperties"] == ["range", "precision", "edge_cases"]

    def test_keys_use_artifact_names(self):
        """Persisted keys are the camelCase names consumers read."""
        self.given_record(expected_result=2)
        self.when_serialized()
        assert list(self.data) == [
            "parameters",
            "declaredReturn",
            "normalizedReturn",
            "signatureHash",
            "testInputs",
            "testableProperties",
            "expectedResult",
        ]

    def test_undefined_result_drops_key(self):
        self.given_record(expected_result=Marker.UNDEFINED)
        self.when_serialized()
        assert "expectedResult" not in self.data

    def test_falsy_results_are_kept(self):
        """Zero, False and None are real fixture values."""
        for value in (0, False, None):
            self.given_record(expected_result=value)
            self.when_serialized()
            assert self.data["expectedResult"] is value

    def test_missing_result_key_reads_as_undefined(self):
        self.given_record(expected_result=Marker.UNDEFINED)
        self.when_serialized()
        restored = FunctionRecord.from_dict("add", self.data)
        assert restored.expected_result is Marker.UNDEFINED

    def test_unknown_marker_is_decoded(self):
        self.given_record(expected_result=Marker.UNKNOWN)
        self.when_serialized()
        restored = FunctionRecord.from_dict("add", self.data)
        assert restored.expected_result is Marker.UNKNOWN
        assert restored == self.record


class TestFunctionTreeJson:
    def test_json_preserves_file_and_function_order(self):
        tree = {
            "server/b.ts": {
                "zeta": FunctionRecord("zeta", {}, "any", "any", "11111111"),
                "alpha": FunctionRecord("alpha", {}, "any", "any", "22222222"),
            },
            "client/a.ts": {
                "main": FunctionRecord("main", {}, "void", "void", "33333333"),
            },
        }
        parsed = json.loads(tree_to_json(tree))
        assert list(parsed) == ["server/b.ts", "client/a.ts"]
        assert list(parsed["server/b.ts"]) == ["zeta", "alpha"]
        assert tree_from_dict(parsed) == tree

    def test_json_is_indented_two_spaces(self):
        tree = {"a.ts": {"f": FunctionRecord("f", {}, "any", "any", "44444444")}}
        assert tree_to_json(tree).startswith('{\n  "a.ts": {\n    "f": {')

    def test_json_rejects_non_finite_numbers(self):
        """Infinity has no JSON form, so serialization refuses it."""
        tree = {
            "a.ts": {
                "f": FunctionRecord(
                    "f", {}, "number", "number", "55555555", expected_result=float("inf")
                )
            }
        }
        with pytest.raises(ValueError):
            tree_to_json(tree)
