"""Pipeline that turns a source tree into a persisted fixture artifact."""

import logging
from dataclasses import replace

from js_fixture_wizard.config import ScanConfig
from js_fixture_wizard.extractor import extract_functions
from js_fixture_wizard.models import FunctionTree
from js_fixture_wizard.properties import generate_testable_properties
from js_fixture_wizard.reconciler import reconcile
from js_fixture_wizard.scanner import iter_source_files, read_source
from js_fixture_wizard.store import load_function_tree, save_function_tree
from js_fixture_wizard.type_inferrer import infer_return_type, needs_inference
from js_fixture_wizard.wizard import AnswerSource, FixtureWizard, RepromptPolicy

logger = logging.getLogger(__name__)


def build_function_tree(config: ScanConfig) -> FunctionTree:
    """Scan the source roots and extract every function signature.

    Files that can't be read, or that contain no functions, are left out.
    """
    tree: FunctionTree = {}

    for source in iter_source_files(config):
        content = read_source(source)
        if content is None:
            continue

        functions = extract_functions(content)
        if functions:
            tree[source.relative_path] = functions
            logger.info(f"Found {len(functions)} functions in {source.relative_path}")

    logger.info(f"Extracted functions from {len(tree)} files")
    return tree


def analyze_tree(tree: FunctionTree) -> FunctionTree:
    """Fill in inferred return types and testable properties."""
    analyzed: FunctionTree = {}

    for file_path, functions in tree.items():
        analyzed[file_path] = {}
        for name, record in functions.items():
            if needs_inference(record):
                record = replace(
                    record, normalized_return=infer_return_type(file_path, record)
                )
            analyzed[file_path][name] = replace(
                record,
                testable_properties=generate_testable_properties(
                    record.normalized_return
                ),
            )

    return analyzed


async def run_pipeline(
    config: ScanConfig,
    answers: AnswerSource,
    policy: RepromptPolicy = RepromptPolicy.ALWAYS,
) -> FunctionTree:
    """Run scan, extract, infer, reconcile, wizard and persist in order.

    The artifact is written once, at the very end; any failure before that
    leaves the previous artifact intact.

    Args:
        config: Scan configuration
        answers: Source of operator answers for the wizard
        policy: Re-prompt behaviour for unchanged functions

    Returns:
        The function tree that was persisted

    Raises:
        PersistenceError: If the artifact could not be written
    """
    logger.info(f"Starting codebase analysis of {config.root}")
    previous = load_function_tree(config.output_path)

    tree = build_function_tree(config)
    tree = analyze_tree(tree)
    tree = reconcile(tree, config)

    wizard = FixtureWizard(answers, previous, policy=policy)
    tree = await wizard.run(tree)

    save_function_tree(tree, config.output_path)
    logger.info(f"Analysis complete: {len(tree)} files with functions")
    return tree


def format_summary(tree: FunctionTree) -> str:
    """Render the completion summary grouped by file."""
    lines = ["Function Tree Summary:", "=" * 22]

    for file_path, functions in tree.items():
        lines.append("")
        lines.append(f"{file_path}:")
        for record in functions.values():
            lines.append(f"  {record.signature}")
            lines.append(f"     Hash: {record.signature_hash}")
            lines.append(
                f"     Testable: {', '.join(record.testable_properties) or 'none'}"
            )

    return "\n".join(lines)
