"""
Adapters between registered actions and language-model tool calling.
"""

import json
import logging
from typing import Any, Dict, List, Sequence, Union

from solana_agent_kit.domains.results import ActionResult
from solana_agent_kit.interfaces.plugins.plugins import Action

# Setup logger for this module
logger = logging.getLogger(__name__)


def create_openai_tools(actions: Sequence[Action]) -> List[Dict[str, Any]]:
    """Convert actions into OpenAI function tool definitions."""
    return [
        {
            "type": "function",
            "function": {
                "name": action.name,
                "description": action.description,
                "parameters": action.get_schema(),
            },
        }
        for action in actions
    ]


def parse_arguments(arguments: Union[str, Dict[str, Any], None]) -> Dict[str, Any]:
    """Parse tool call arguments from a JSON string or mapping.

    Raises:
        ValueError: if the arguments are not a JSON object
    """
    if arguments is None or arguments == "":
        return {}
    if isinstance(arguments, dict):
        return arguments
    parsed = json.loads(arguments)
    if not isinstance(parsed, dict):
        raise ValueError("Tool arguments must be a JSON object")
    return parsed


async def execute_tool_call(
    agent: Any,
    name: str,
    arguments: Union[str, Dict[str, Any], None],
) -> Dict[str, Any]:
    """Run the action a model asked for and return its result envelope.

    Never raises: unknown tools and malformed arguments become error envelopes.
    """
    action = agent.get_action(name)
    if action is None:
        logger.warning(f"Tool '{name}' not found for execution.")
        return ActionResult.error(
            f"Tool {name} not found", code="UNKNOWN_TOOL"
        ).to_dict()

    try:
        params = parse_arguments(arguments)
    except ValueError as e:
        logger.warning(f"Malformed arguments for tool '{name}': {e}")
        return ActionResult.error(
            f"Invalid arguments for {name}: {e}", code="INVALID_INPUT"
        ).to_dict()

    logger.info(f"Executing tool '{name}' with params: {params}")
    result = await action.execute(agent, params)
    logger.info(f"Tool '{name}' execution result status: {result.get('status')}")
    return result
