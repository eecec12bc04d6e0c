"""Interactive wizard that records test inputs and expected results."""

import enum
import logging
import sys
from dataclasses import replace
from typing import TextIO

from js_fixture_wizard.models import FunctionRecord, FunctionTree, Marker
from js_fixture_wizard.wizard.answers import AnswerSource
from js_fixture_wizard.wizard.coercion import coerce_value

logger = logging.getLogger(__name__)

VOID_TYPES = ("void", "undefined")

UPDATE_PROMPT = "Do you want to update test parameters? (y/n): "
RESULT_PROMPT = 'Enter expected result value (or "unknown"): '


class RepromptPolicy(enum.Enum):
    """What to do with a function whose signature hash is unchanged."""

    ALWAYS = "always"
    SKIP_UNCHANGED = "skip_unchanged"


class FixtureWizard:
    """Walk a function tree and ask the operator for fixture values.

    Functions are visited strictly in tree order, one question at a time.
    A function whose signature changed since the previous run asks whether to
    re-enter values; declining carries the previous answers forward.

    Usage:
        wizard = FixtureWizard(ConsoleAnswerSource(), previous_tree)
        tree = await wizard.run(tree)
    """

    def __init__(
        self,
        answers: AnswerSource,
        previous_tree: FunctionTree,
        policy: RepromptPolicy = RepromptPolicy.ALWAYS,
        out: TextIO | None = None,
    ):
        self._answers = answers
        self._previous = previous_tree
        self._policy = policy
        self._out = out

    def _say(self, message: str = "") -> None:
        print(message, file=self._out or sys.stdout)

    async def run(self, tree: FunctionTree) -> FunctionTree:
        """Collect fixtures for every function in the tree.

        Args:
            tree: Analyzed function tree

        Returns:
            A new tree whose records carry test inputs and expected results
        """
        self._say("\nStarting function test wizard...")
        result: FunctionTree = {}

        for file_path, functions in tree.items():
            self._say(f"\nProcessing file: {file_path}")
            result[file_path] = {}
            for name, record in functions.items():
                previous = self._previous.get(file_path, {}).get(name)
                result[file_path][name] = await self._configure(record, previous)

        return result

    async def _configure(
        self, record: FunctionRecord, previous: FunctionRecord | None
    ) -> FunctionRecord:
        self._say(f"\nFunction: {record.name}")
        self._say(f"   Return type: {record.normalized_return}")
        self._say(
            f"   Testable properties: {', '.join(record.testable_properties) or 'none'}"
        )

        if previous is not None:
            if previous.signature_hash != record.signature_hash:
                self._say(f"Function {record.name} has changed!")
                answer = await self._answers.ask(UPDATE_PROMPT)
                if answer.lower() != "y":
                    logger.info(f"Keeping previous fixture for {record.name}")
                    return _carry_forward(record, previous)
            elif self._policy is RepromptPolicy.SKIP_UNCHANGED:
                logger.info(f"Unchanged function {record.name}, reusing fixture")
                return _carry_forward(record, previous)

        test_inputs = {}
        for arg_name, arg_type in record.parameters.items():
            self._say(f"\nArgument: {arg_name} ({arg_type})")
            answer = await self._answers.ask(f"Enter test value for {arg_name}: ")
            test_inputs[arg_name] = coerce_value(answer, arg_type)

        expected = await self._ask_result(record)
        self._say(f"Function {record.name} configured")
        return replace(record, test_inputs=test_inputs, expected_result=expected)

    async def _ask_result(self, record: FunctionRecord):
        self._say(f"\nExpected result for {record.name} ({record.normalized_return})")

        if record.normalized_return in VOID_TYPES:
            self._say("Function returns void/undefined - no result needed")
            return Marker.UNDEFINED

        answer = await self._answers.ask(RESULT_PROMPT)
        if answer.lower() == "unknown":
            return Marker.UNKNOWN
        return coerce_value(answer, record.normalized_return)


def _carry_forward(record: FunctionRecord, previous: FunctionRecord) -> FunctionRecord:
    return replace(
        record,
        test_inputs=dict(previous.test_inputs),
        expected_result=previous.expected_result,
    )
