"""
Tool-calling conversation runtime.

Drives a language model over the agent's actions: streamed tool-call deltas
are aggregated, the requested actions run, and their result envelopes are
fed back until the model answers in plain text.
"""

import json
import logging
from typing import Any, Callable, Dict, List, Optional

from pydantic import BaseModel, Field, ValidationError

from solana_agent_kit.domains.errors import AgentKitError
from solana_agent_kit.domains.evals import ToolCall
from solana_agent_kit.domains.results import ActionResult
from solana_agent_kit.interfaces.providers.llm import LLMProvider
from solana_agent_kit.plugins.actions.action import format_validation_error
from solana_agent_kit.services.tools import (
    create_openai_tools,
    execute_tool_call,
    parse_arguments,
)

# Setup logger for this module
logger = logging.getLogger(__name__)

DEFAULT_SYSTEM_PROMPT = (
    "You are a helpful agent that can interact on-chain on Solana using the "
    "provided tools. If a tool needs parameters the user has not given yet, ask "
    "for them instead of guessing. Never invent transaction signatures or "
    "addresses. If a tool returns an error, explain it to the user."
)


class TurnOutcome(BaseModel):
    """What the model did in answer to one user message."""

    text: str = ""
    tool_calls: List[ToolCall] = Field(default_factory=list)
    tool_results: List[Dict[str, Any]] = Field(default_factory=list)


class AgentService:
    """Runs multi-turn tool-calling conversations against the agent's actions."""

    def __init__(
        self,
        agent: Any,
        llm_provider: LLMProvider,
        system_prompt: Optional[str] = None,
        model: Optional[str] = None,
        max_tool_rounds: int = 8,
        dry_run: bool = False,
    ):
        self.agent = agent
        self.llm_provider = llm_provider
        self.system_prompt = system_prompt or DEFAULT_SYSTEM_PROMPT
        self.model = model
        self.max_tool_rounds = max_tool_rounds
        self.dry_run = dry_run

    def new_conversation(self) -> List[Dict[str, Any]]:
        return [{"role": "system", "content": self.system_prompt}]

    async def _run_tool(self, name: str, arguments: str) -> Dict[str, Any]:
        if not self.dry_run:
            return await execute_tool_call(self.agent, name, arguments)

        action = self.agent.get_action(name)
        if action is None:
            return ActionResult.error(
                f"Tool {name} not found", code="UNKNOWN_TOOL"
            ).to_dict()
        try:
            action.validate(parse_arguments(arguments))
        except ValidationError as e:
            return ActionResult.error(
                f"Invalid input for {name}: {format_validation_error(e)}",
                code="INVALID_INPUT",
            ).to_dict()
        except ValueError as e:
            return ActionResult.error(
                f"Invalid arguments for {name}: {e}", code="INVALID_INPUT"
            ).to_dict()
        return ActionResult.success(f"Dry run: {name} was not executed").to_dict()

    async def respond(
        self,
        messages: List[Dict[str, Any]],
        user_input: str,
        on_delta: Optional[Callable[[str], None]] = None,
    ) -> TurnOutcome:
        """Append a user message and run the model until it answers in text.

        ``messages`` is extended in place with the assistant and tool messages.

        Raises:
            AgentKitError: if the provider reports an error or tool rounds run out
        """
        messages.append({"role": "user", "content": user_input})
        tools = create_openai_tools(self.agent.actions)
        outcome = TurnOutcome()
        rounds = 0

        while True:
            # Aggregate tool calls by index and merge late IDs
            tool_calls: Dict[int, Dict[str, Any]] = {}
            text = ""

            async for event in self.llm_provider.chat_stream(
                messages=messages,
                model=self.model,
                tools=tools if tools else None,
            ):
                etype = event.get("type")
                if etype == "content":
                    delta = event.get("delta", "")
                    text += delta
                    if on_delta:
                        on_delta(delta)
                elif etype == "tool_call_delta":
                    index_raw = event.get("index")
                    try:
                        index = int(index_raw) if index_raw is not None else 0
                    except (TypeError, ValueError):
                        index = 0
                    entry = tool_calls.setdefault(
                        index, {"id": None, "name": None, "arguments": ""}
                    )
                    if event.get("id") and not entry["id"]:
                        entry["id"] = event["id"]
                    if event.get("name") and not entry["name"]:
                        entry["name"] = event["name"]
                    entry["arguments"] += event.get("arguments_delta", "")
                elif etype == "error":
                    raise AgentKitError(f"Language model error: {event.get('error')}")

            named_calls = []
            for idx in sorted(tool_calls):
                tc = tool_calls[idx]
                name = (tc.get("name") or "").strip()
                if not name:
                    logger.warning(
                        f"Skipping unnamed tool call at index {idx}; cannot send empty function name."
                    )
                    continue
                named_calls.append(
                    {
                        "id": tc.get("id") or f"call_{idx}",
                        "name": name,
                        "arguments": tc.get("arguments") or "{}",
                    }
                )

            if not named_calls:
                if text:
                    messages.append({"role": "assistant", "content": text})
                outcome.text = text
                return outcome

            if rounds >= self.max_tool_rounds:
                raise AgentKitError(
                    f"Model kept calling tools after {self.max_tool_rounds} rounds"
                )
            rounds += 1

            messages.append(
                {
                    "role": "assistant",
                    "content": None,
                    "tool_calls": [
                        {
                            "id": call["id"],
                            "type": "function",
                            "function": {
                                "name": call["name"],
                                "arguments": call["arguments"],
                            },
                        }
                        for call in named_calls
                    ],
                }
            )

            for call in named_calls:
                try:
                    parsed = parse_arguments(call["arguments"])
                except ValueError:
                    parsed = {}
                outcome.tool_calls.append(
                    ToolCall(id=call["id"], name=call["name"], arguments=parsed)
                )
                result = await self._run_tool(call["name"], call["arguments"])
                outcome.tool_results.append(result)
                messages.append(
                    {
                        "role": "tool",
                        "tool_call_id": call["id"],
                        "content": json.dumps(result),
                    }
                )
