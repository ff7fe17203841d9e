"""
LLM provider adapter for the Solana Agent Kit.

Implements the LLMProvider interface on top of the OpenAI Responses API,
normalizing streamed output into content and tool-call delta events.
"""

import logging
from typing import Any, AsyncGenerator, Dict, List, Optional

from openai import AsyncOpenAI, OpenAIError
import logfire

from solana_agent_kit.interfaces.providers.llm import LLMProvider

# Setup logger for this module
logger = logging.getLogger(__name__)

DEFAULT_CHAT_MODEL = "gpt-4.1"


def to_responses_tools(tools: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Convert chat-completions style function tools to Responses API format."""
    responses_tools = []
    for tool in tools:
        if tool.get("type") == "function":
            func = tool.get("function", {})
            responses_tools.append(
                {
                    "type": "function",
                    "name": func.get("name"),
                    "description": func.get("description", ""),
                    "parameters": func.get("parameters", {}),
                }
            )
        else:
            responses_tools.append(tool)
    return responses_tools


def to_responses_input(messages: List[Dict[str, Any]]) -> Dict[str, Any]:
    """Split chat messages into Responses API ``instructions`` and ``input`` items."""
    instructions = None
    input_items: List[Dict[str, Any]] = []
    for msg in messages:
        role = msg.get("role", "")
        content = msg.get("content")

        if role == "system":
            instructions = content
        elif role == "user":
            input_items.append({"role": "user", "content": content or ""})
        elif role == "assistant":
            tool_calls = msg.get("tool_calls")
            if tool_calls:
                for tc in tool_calls:
                    func = tc.get("function", {})
                    input_items.append(
                        {
                            "type": "function_call",
                            "call_id": tc.get("id", ""),
                            "name": func.get("name", ""),
                            "arguments": func.get("arguments", "{}"),
                        }
                    )
            elif content:
                input_items.append({"role": "assistant", "content": content})
        elif role == "tool":
            input_items.append(
                {
                    "type": "function_call_output",
                    "call_id": msg.get("tool_call_id", ""),
                    "output": content or "",
                }
            )
    return {"instructions": instructions, "input": input_items}


class OpenAIAdapter(LLMProvider):
    """OpenAI implementation of LLMProvider using the Responses API."""

    def __init__(
        self,
        api_key: str,
        model: Optional[str] = None,
        logfire_api_key: Optional[str] = None,
        client: Optional[AsyncOpenAI] = None,
    ):
        self.api_key = api_key
        self.client = client or AsyncOpenAI(api_key=api_key)
        self.text_model = model or DEFAULT_CHAT_MODEL

        self.logfire = False
        if logfire_api_key:
            try:
                logfire.configure(token=logfire_api_key)
                self.logfire = True
                logfire.instrument_openai(self.client)
                logger.info(
                    "Logfire configured and OpenAI client instrumented successfully."
                )
            except Exception as e:
                logger.error(f"Failed to configure Logfire: {e}")
                self.logfire = False

    async def generate_text(
        self,
        prompt: str,
        system_prompt: str = "",
        model: Optional[str] = None,
    ) -> str:
        """Generate a single text answer."""
        request_params: Dict[str, Any] = {
            "model": model or self.text_model,
            "input": prompt,
        }
        if system_prompt:
            request_params["instructions"] = system_prompt

        try:
            response = await self.client.responses.create(**request_params)
            return response.output_text or ""
        except OpenAIError as e:
            logger.error(f"OpenAI API error during text generation: {e}")
            raise

    async def chat_stream(
        self,
        messages: List[Dict[str, Any]],
        model: Optional[str] = None,
        tools: Optional[List[Dict[str, Any]]] = None,
    ) -> AsyncGenerator[Dict[str, Any], None]:
        """Stream responses with optional tool calls using OpenAI Responses API."""
        try:
            converted = to_responses_input(messages)
            request_params: Dict[str, Any] = {
                "model": model or self.text_model,
                "input": converted["input"],
                "stream": True,
            }
            if converted["instructions"]:
                request_params["instructions"] = converted["instructions"]
            if tools:
                request_params["tools"] = to_responses_tools(tools)

            stream = await self.client.responses.create(**request_params)
            async for event in stream:
                event_type = getattr(event, "type", None)

                if event_type == "response.output_text.delta":
                    delta = getattr(event, "delta", "")
                    if delta:
                        yield {"type": "content", "delta": delta}

                elif event_type == "response.function_call_arguments.delta":
                    yield {
                        "type": "tool_call_delta",
                        "id": None,
                        "index": getattr(event, "output_index", 0),
                        "name": None,
                        "arguments_delta": getattr(event, "delta", ""),
                    }

                elif event_type == "response.output_item.added":
                    item = getattr(event, "item", None)
                    if item and getattr(item, "type", None) == "function_call":
                        yield {
                            "type": "tool_call_delta",
                            "id": getattr(item, "call_id", None),
                            "index": getattr(event, "output_index", 0),
                            "name": getattr(item, "name", None),
                            "arguments_delta": "",
                        }

                elif event_type == "response.completed":
                    yield {"type": "message_end", "finish_reason": "stop"}
                    return

            yield {"type": "message_end", "finish_reason": "end_of_stream"}
        except Exception as e:
            logger.exception(f"Error in chat_stream: {e}")
            yield {"type": "error", "error": str(e)}
