"""
Result envelope returned by every action.

The envelope always carries ``status`` and ``message``; operation-specific
fields (transaction signature, amount, url...) ride along as extras.
"""
from typing import Any, Dict, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class ActionResult(BaseModel):
    """Structured outcome of an action invocation."""

    model_config = ConfigDict(extra="allow")

    status: Literal["success", "error"] = Field(
        ..., description="Outcome of the action"
    )
    message: str = Field(..., description="Human readable summary")
    code: Optional[str] = Field(
        None, description="Machine readable error code, only set on errors"
    )

    @model_validator(mode="after")
    def transaction_only_on_success(self) -> "ActionResult":
        """A transaction signature is only meaningful for successful operations."""
        extras = self.model_extra or {}
        if self.status == "error" and extras.get("transaction") is not None:
            raise ValueError("Error results cannot carry a transaction")
        return self

    @classmethod
    def success(cls, message: str, **fields: Any) -> "ActionResult":
        return cls(status="success", message=message, **fields)

    @classmethod
    def error(cls, message: str, code: str = "UNKNOWN_ERROR", **fields: Any) -> "ActionResult":
        return cls(status="error", message=message, code=code, **fields)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to a plain dict, dropping an unset error code."""
        return self.model_dump(exclude_none=True)
