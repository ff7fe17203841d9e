"""
Action implementation for the Solana Agent Kit.

An Action pairs a pydantic input schema with an async handler. Input is
validated before the handler runs, so malformed calls never reach the network.
"""
import logging
from typing import Any, Awaitable, Callable, Dict, List, Optional, Type

from pydantic import BaseModel, Field, ValidationError

from solana_agent_kit.domains.errors import classify_error
from solana_agent_kit.domains.results import ActionResult
from solana_agent_kit.interfaces.plugins.plugins import Action as ActionInterface

# Setup logger for this module
logger = logging.getLogger(__name__)

ActionHandler = Callable[[Any, Any], Awaitable[Any]]


class ActionExample(BaseModel):
    """Example invocation shown to language models."""

    input: Dict[str, Any] = Field(default_factory=dict)
    output: Dict[str, Any] = Field(default_factory=dict)
    explanation: str = ""


def format_validation_error(error: ValidationError) -> str:
    """Render pydantic validation errors as ``field: message`` pairs."""
    parts = []
    for err in error.errors(include_url=False):
        location = ".".join(str(p) for p in err.get("loc", ())) or "input"
        parts.append(f"{location}: {err.get('msg', 'invalid value')}")
    return "; ".join(parts)


class Action(ActionInterface):
    """Schema-validated operation a language model can invoke."""

    def __init__(
        self,
        name: str,
        description: str,
        schema: Type[BaseModel],
        handler: ActionHandler,
        similes: Optional[List[str]] = None,
        examples: Optional[List[ActionExample]] = None,
    ):
        self._name = name
        self._description = description
        self._schema = schema
        self._handler = handler
        self._similes = list(similes or [])
        self._examples = list(examples or [])

    @property
    def name(self) -> str:
        return self._name

    @property
    def description(self) -> str:
        return self._description

    @property
    def similes(self) -> List[str]:
        return self._similes

    @property
    def examples(self) -> List[ActionExample]:
        return self._examples

    @property
    def schema(self) -> Type[BaseModel]:
        return self._schema

    def get_schema(self) -> Dict[str, Any]:
        """Return the JSON schema for this action's parameters."""
        return self._schema.model_json_schema(by_alias=True)

    def validate(self, params: Optional[Dict[str, Any]]) -> BaseModel:
        """Validate raw parameters against the action schema.

        Raises:
            ValidationError: if the parameters do not match the schema
        """
        return self._schema.model_validate(params or {})

    async def execute(self, agent: Any, params: Dict[str, Any]) -> Dict[str, Any]:
        """Validate, run the handler and return a result envelope. Never raises."""
        try:
            validated = self.validate(params)
        except ValidationError as e:
            message = f"Invalid input for {self._name}: {format_validation_error(e)}"
            logger.warning(message)
            return ActionResult.error(message, code="INVALID_INPUT").to_dict()

        try:
            result = await self._handler(agent, validated)
        except Exception as e:
            logger.error(f"Action {self._name} failed: {e}")
            return ActionResult.error(str(e), code=classify_error(e)).to_dict()

        if isinstance(result, ActionResult):
            return result.to_dict()
        try:
            return ActionResult.model_validate(result).to_dict()
        except ValidationError as e:
            message = (
                f"Action {self._name} returned an invalid result: "
                f"{format_validation_error(e)}"
            )
            logger.error(message)
            return ActionResult.error(message, code="INVALID_RESULT").to_dict()
