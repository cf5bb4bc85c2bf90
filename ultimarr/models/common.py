# The module is to define the common model for the application.
# Date: 2026-10-17
# Version: 0.1.0

from pydantic import BaseModel, Field
from typing import Optional


class ToolResult(BaseModel):
    """
    The outcome of a single tool invocation, as handed back to the MCP caller.
    Attributes:
        text (str): The formatted result, or the error message when is_error is set.
        is_error (bool): Whether the invocation failed.
        kind (Optional[str]): The error class name for failed invocations.
    """
    text: str = Field(..., description="Formatted result or error message.")
    is_error: bool = Field(default=False, description="Whether the invocation failed.")
    kind: Optional[str] = Field(default=None, description="Error class name for failed invocations.")

    @classmethod
    def ok(cls, text: str) -> "ToolResult":
        return cls(text=text)

    @classmethod
    def fail(cls, error: Exception) -> "ToolResult":
        return cls(text=str(error), is_error=True, kind=type(error).__name__)
