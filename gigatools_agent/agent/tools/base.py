"""Tool contract, declarative descriptors, and function-backed tools."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable

from pydantic import BaseModel, ConfigDict, Field


class ToolResult(BaseModel):
    """Value returned by every tool invocation."""

    model_config = ConfigDict(frozen=True)

    result: str = Field(..., description="Calculation result")


@dataclass(frozen=True)
class ToolParameter:
    """A single described, typed tool argument."""

    name: str
    description: str
    type: str = "number"
    required: bool = True

    def to_schema(self) -> dict[str, Any]:
        return {"type": self.type, "description": self.description}


@dataclass(frozen=True)
class ToolDescriptor:
    """
    Metadata the model uses to pick a tool and fill in its arguments.

    The usage text and parameter descriptions are prompt material: their wording
    directly affects when the model decides to call the tool.
    """

    name: str
    description: str
    parameters: tuple[ToolParameter, ...] = ()

    @property
    def parameter_names(self) -> tuple[str, ...]:
        return tuple(param.name for param in self.parameters)

    def to_json_schema(self) -> dict[str, Any]:
        """Render the parameters as a JSON-schema object."""
        return {
            "type": "object",
            "properties": {param.name: param.to_schema() for param in self.parameters},
            "required": [param.name for param in self.parameters if param.required],
        }


class Tool(ABC):
    """Base tool contract."""

    _TYPE_MAP = {
        "string": str,
        "integer": int,
        "number": (int, float),
        "boolean": bool,
        "array": list,
        "object": dict,
    }

    @property
    @abstractmethod
    def name(self) -> str:
        pass

    @property
    @abstractmethod
    def description(self) -> str:
        pass

    @property
    @abstractmethod
    def parameters(self) -> dict[str, Any]:
        pass

    @abstractmethod
    async def execute(self, **kwargs: Any) -> str:
        pass

    def validate_params(self, params: dict[str, Any]) -> list[str]:
        """Check params against a flat object schema, returning readable errors."""
        schema = self.parameters or {}
        if schema.get("type", "object") != "object":
            raise ValueError(f"Schema must be object type, got {schema.get('type')!r}")

        properties = schema.get("properties", {})
        errors = [f"missing required {key}" for key in schema.get("required", []) if key not in params]
        for key, value in params.items():
            expected_type = properties.get(key, {}).get("type")
            if expected_type not in self._TYPE_MAP:
                continue
            # bool is an int subclass, but true/false is never a valid number here
            is_bool_number = expected_type in ("integer", "number") and isinstance(value, bool)
            if is_bool_number or not isinstance(value, self._TYPE_MAP[expected_type]):
                errors.append(f"{key} should be {expected_type}")
        return errors

    def to_schema(self) -> dict[str, Any]:
        return {
            "type": "function",
            "function": {
                "name": self.name,
                "description": self.description,
                "parameters": self.parameters,
            },
        }


class FunctionTool(Tool):
    """A tool backed by a plain function and an explicit descriptor."""

    def __init__(self, descriptor: ToolDescriptor, func: Callable[..., ToolResult]) -> None:
        self.descriptor = descriptor
        self._func = func

    @property
    def name(self) -> str:
        return self.descriptor.name

    @property
    def description(self) -> str:
        return self.descriptor.description

    @property
    def parameters(self) -> dict[str, Any]:
        return self.descriptor.to_json_schema()

    async def execute(self, **kwargs: Any) -> str:
        # Models sometimes send placeholder arguments to zero-argument tools.
        accepted = {key: value for key, value in kwargs.items() if key in self.descriptor.parameter_names}
        return self._func(**accepted).model_dump_json()
