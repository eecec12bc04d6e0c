"""Interactive fixture collection."""

from js_fixture_wizard.wizard.answers import (
    FALLBACK_ANSWER,
    AnswerSource,
    ConsoleAnswerSource,
    ScriptedAnswerSource,
    load_answers_file,
)
from js_fixture_wizard.wizard.coercion import coerce_value
from js_fixture_wizard.wizard.session import FixtureWizard, RepromptPolicy

__all__ = [
    # Answer sources
    "FALLBACK_ANSWER",
    "AnswerSource",
    "ConsoleAnswerSource",
    "ScriptedAnswerSource",
    "load_answers_file",
    # Coercion
    "coerce_value",
    # Wizard
    "FixtureWizard",
    "RepromptPolicy",
]
