"""
Domain models for multi-turn tool-call evaluations.

A dataset describes one conversation: a list of user turns, each asserting
either a free-text response or a specific tool invocation.
"""
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class ExpectedToolCall(BaseModel):
    """Tool invocation a turn is expected to trigger."""

    tool: str = Field(..., description="Name of the tool the model must call")
    params: Dict[str, Any] = Field(
        default_factory=dict, description="Exact arguments the tool must receive"
    )


class EvalTurn(BaseModel):
    """One user message and its expectation."""

    model_config = ConfigDict(populate_by_name=True)

    input: str = Field(..., description="User message for this turn")
    expected_response: Optional[str] = Field(
        None, alias="expectedResponse", description="Reference assistant reply"
    )
    expected_tool_call: Optional[ExpectedToolCall] = Field(
        None, alias="expectedToolCall", description="Tool call the turn must produce"
    )

    @model_validator(mode="after")
    def has_expectation(self) -> "EvalTurn":
        if self.expected_response is None and self.expected_tool_call is None:
            raise ValueError(
                "Each turn needs an expectedResponse or an expectedToolCall"
            )
        return self


class ComplexEvalDataset(BaseModel):
    """A multi-turn conversation fixture."""

    description: str
    inputs: Dict[str, Any] = Field(default_factory=dict)
    turns: List[EvalTurn] = Field(..., min_length=1)


class ToolCall(BaseModel):
    """A tool call made by the model during a turn."""

    id: str
    name: str
    arguments: Dict[str, Any] = Field(default_factory=dict)


class TurnResult(BaseModel):
    """Outcome of evaluating a single turn."""

    input: str
    passed: bool
    reason: str = ""
    response: str = ""
    expected_response: Optional[str] = None
    expected_tool_call: Optional[ExpectedToolCall] = None
    tool_calls: List[ToolCall] = Field(default_factory=list)


class DatasetResult(BaseModel):
    """Outcome of evaluating one dataset."""

    description: str
    turns: List[TurnResult] = Field(default_factory=list)

    @property
    def passed(self) -> bool:
        return all(turn.passed for turn in self.turns)


class EvalReport(BaseModel):
    """Aggregate outcome of an evaluation run."""

    name: str
    datasets: List[DatasetResult] = Field(default_factory=list)

    @property
    def total_turns(self) -> int:
        return sum(len(d.turns) for d in self.datasets)

    @property
    def passed_turns(self) -> int:
        return sum(1 for d in self.datasets for t in d.turns if t.passed)

    @property
    def passed(self) -> bool:
        return all(d.passed for d in self.datasets)
