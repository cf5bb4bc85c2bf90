# The module is to define the base class for all tools in the application.
# Date: 2026-10-17
# Version: 0.1.0

from abc import ABC, abstractmethod
from typing import Annotated, Any, Dict, Optional, Type

from mcp import types
from pydantic import BaseModel, BeforeValidator, ValidationError

from ultimarr.core.errors import InvalidArgument
from ultimarr.services.base_service import ServiceClient
from ultimarr.utils.logger import console


def _whole_number(value: Any) -> Any:
    # JSON numbers may arrive as floats; strings and booleans are not numbers here.
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError("must be a number")
    if isinstance(value, float):
        if not value.is_integer():
            raise ValueError("must be a whole number")
        return int(value)
    return value


WholeNumber = Annotated[int, BeforeValidator(_whole_number)]


class NoInput(BaseModel):
    """Input model for tools that take no arguments."""


class BaseTool(ABC):
    """
    Abstract Base Class for all tools.

    This class defines a standard interface that all tools must implement.
    Attributes:
        name (str): The name of the tool, used for identification.
        description (str): A brief description of what the tool does.
        service (str): The upstream service whose adapter the tool is bound to.
        args_schema (Type[BaseModel]): A Pydantic model defining the arguments
            that the tool accepts, which will be validated before execution.
    """
    name: str
    description: str
    service: str
    args_schema: Type[BaseModel]

    def __init__(self, client: ServiceClient):
        self.client = client

    @abstractmethod
    async def execute(self, **kwargs) -> str:
        """
        The core logic of the tool. This method must be implemented by all subclasses.

        Args:
            **kwargs: The arguments for the tool, validated against args_schema.

        Returns:
            A string summarizing the result of the tool's execution.
        """

    async def run(self, arguments: Optional[Dict[str, Any]]) -> str:
        """Validates the raw arguments of a call, then executes the tool with them."""
        try:
            validated = self.args_schema.model_validate(arguments or {})
        except ValidationError as e:
            raise self._invalid_argument(e) from e

        console.info(f"Executing tool '{self.name}' with arguments: {validated.model_dump()}")
        result = await self.execute(**validated.model_dump())
        console.success(f"Tool '{self.name}' executed successfully.")
        return result

    def get_definition(self) -> types.Tool:
        """
        Returns the tool's definition in the form the MCP tools/list response expects.
        This method is inherited by all tools.
        """
        return types.Tool(
            name=self.name,
            description=self.description,
            inputSchema=self.args_schema.model_json_schema(),
        )

    def _invalid_argument(self, error: ValidationError) -> InvalidArgument:
        first = error.errors()[0]
        argument = ".".join(str(part) for part in first["loc"]) or "arguments"
        return InvalidArgument(argument, self._expected_type(argument), first["msg"])

    def _expected_type(self, argument: str) -> str:
        properties = self.args_schema.model_json_schema().get("properties", {})
        field = properties.get(argument, {})
        if "enum" in field:
            return "one of " + ", ".join(repr(choice) for choice in field["enum"])
        if argument not in properties:
            return "object"
        return field.get("type", "value")
