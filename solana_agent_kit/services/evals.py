"""
Multi-turn tool-call evaluation harness.

Each dataset is played as one conversation. A turn expecting a tool call
passes when the model calls that tool with exactly the expected parameters;
a turn expecting only a response passes when the model answers in text
without calling any tool.
"""

import json
import logging
from importlib import resources
from pathlib import Path
from typing import List, Optional, Sequence, Union

from solana_agent_kit.domains.errors import AgentKitError
from solana_agent_kit.domains.evals import (
    ComplexEvalDataset,
    DatasetResult,
    EvalReport,
    EvalTurn,
    ExpectedToolCall,
    ToolCall,
    TurnResult,
)
from solana_agent_kit.services.agent import AgentService, TurnOutcome

# Setup logger for this module
logger = logging.getLogger(__name__)

BUNDLED_DATASETS = {
    "multi_solana_deploy_collection": "metaplex/multi_solana_deploy_collection.json",
}


def load_dataset(path: Union[str, Path]) -> List[ComplexEvalDataset]:
    """Load a JSON eval file holding one dataset object or a list of them."""
    with open(path, "r") as f:
        raw = json.load(f)
    if isinstance(raw, dict):
        raw = [raw]
    return [ComplexEvalDataset.model_validate(entry) for entry in raw]


def load_bundled_dataset(name: str) -> List[ComplexEvalDataset]:
    """Load one of the datasets shipped with the package."""
    if name not in BUNDLED_DATASETS:
        raise KeyError(
            f"Unknown bundled dataset {name}. Available: {sorted(BUNDLED_DATASETS)}"
        )
    resource = resources.files("solana_agent_kit.evals").joinpath(
        BUNDLED_DATASETS[name]
    )
    with resources.as_file(resource) as path:
        return load_dataset(path)


def find_matching_call(
    expected: ExpectedToolCall, calls: Sequence[ToolCall]
) -> Optional[ToolCall]:
    """Return the first call with the expected tool name and exactly equal params."""
    for call in calls:
        if call.name == expected.tool and call.arguments == expected.params:
            return call
    return None


def evaluate_turn(turn: EvalTurn, outcome: TurnOutcome) -> TurnResult:
    result = TurnResult(
        input=turn.input,
        passed=False,
        response=outcome.text,
        expected_response=turn.expected_response,
        expected_tool_call=turn.expected_tool_call,
        tool_calls=outcome.tool_calls,
    )

    expected = turn.expected_tool_call
    if expected is not None:
        if find_matching_call(expected, outcome.tool_calls):
            result.passed = True
        elif any(call.name == expected.tool for call in outcome.tool_calls):
            actual = [c.arguments for c in outcome.tool_calls if c.name == expected.tool]
            result.reason = (
                f"{expected.tool} called with {actual}, expected {expected.params}"
            )
        elif outcome.tool_calls:
            called = [c.name for c in outcome.tool_calls]
            result.reason = f"Expected {expected.tool}, model called {called}"
        else:
            result.reason = f"Expected {expected.tool}, model made no tool call"
        return result

    if outcome.tool_calls:
        called = [c.name for c in outcome.tool_calls]
        result.reason = f"Expected a text response, model called {called}"
    elif not outcome.text.strip():
        result.reason = "Model returned an empty response"
    else:
        result.passed = True
    return result


async def run_complex_eval(
    datasets: Sequence[ComplexEvalDataset],
    name: str,
    service: AgentService,
) -> EvalReport:
    """Play every dataset as a conversation and collect per-turn results."""
    if not service.dry_run:
        logger.warning(f"Eval '{name}' is running with live tool execution")

    report = EvalReport(name=name)
    for dataset in datasets:
        logger.info(f"Running eval dataset: {dataset.description}")
        dataset_result = DatasetResult(description=dataset.description)
        messages = service.new_conversation()

        for turn in dataset.turns:
            try:
                outcome = await service.respond(messages, turn.input)
            except AgentKitError as e:
                logger.error(f"Turn failed with error: {e}")
                dataset_result.turns.append(
                    TurnResult(
                        input=turn.input,
                        passed=False,
                        reason=str(e),
                        expected_response=turn.expected_response,
                        expected_tool_call=turn.expected_tool_call,
                    )
                )
                continue

            turn_result = evaluate_turn(turn, outcome)
            if not turn_result.passed:
                logger.info(f"Turn '{turn.input}' failed: {turn_result.reason}")
            dataset_result.turns.append(turn_result)

        report.datasets.append(dataset_result)

    logger.info(
        f"Eval '{name}': {report.passed_turns}/{report.total_turns} turns passed"
    )
    return report
