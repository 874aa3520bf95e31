"""Tool capability model.

A tool advertised to the endpoint needs a name, a description and a JSON
Schema for its parameters. Tools provide these by implementing the
``DeclaredTool`` protocol. ``OpaqueTool`` attaches an explicitly registered
schema to any value, and ``FunctionTool`` derives one from a plain function.
"""

import inspect
from collections.abc import Callable
from typing import Any, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, create_model, field_validator


class ToolDeclaration(BaseModel):
    """Name, description and parameter schema of a tool."""

    model_config = ConfigDict(extra="ignore")

    name: str = ""
    description: str = ""
    parameters: dict[str, Any] | None = None

    @field_validator("name", "description", mode="before")
    @classmethod
    def _none_as_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("parameters", mode="before")
    @classmethod
    def _schema_or_none(cls, value: Any) -> Any:
        # A schema that is not an object cannot be advertised; keep the tool without it
        return value if isinstance(value, dict) else None


@runtime_checkable
class DeclaredTool(Protocol):
    """A tool that can describe itself."""

    def declaration(self) -> ToolDeclaration:
        """Return the tool's declaration."""
        ...


class OpaqueTool:
    """Wraps a tool value whose metadata cannot be read from the value itself.

    Args:
        tool: The underlying tool object; kept as-is and exposed as ``tool``.
        name: Name advertised to the endpoint.
        description: Human readable description for the model.
        parameters: JSON Schema of the tool arguments.
    """

    def __init__(
        self,
        tool: Any,
        *,
        name: str,
        description: str = "",
        parameters: dict[str, Any] | None = None,
    ) -> None:
        self.tool = tool
        self._declaration = ToolDeclaration(
            name=name, description=description, parameters=parameters
        )

    def declaration(self) -> ToolDeclaration:
        return self._declaration


class FunctionTool:
    """Exposes a Python function as a tool.

    The parameter schema is built from the function signature: each parameter
    becomes a field of a pydantic model and the model's JSON Schema is
    advertised. Parameters without annotations are typed as ``Any``.

    Usage:
        ```python
        def search(query: str, limit: int = 5) -> dict:
            \"\"\"Search the web.\"\"\"
            ...

        tool = FunctionTool(search)
        tool.declaration().parameters["required"]  # ["query"]
        ```
    """

    def __init__(
        self,
        func: Callable[..., Any],
        *,
        name: str | None = None,
        description: str | None = None,
    ) -> None:
        self.func = func
        self.name = name or func.__name__
        self.description = (
            description if description is not None else inspect.getdoc(func) or ""
        )
        self._args_model = self._build_args_model()

    def _build_args_model(self) -> type[BaseModel]:
        fields: dict[str, Any] = {}
        for param in inspect.signature(self.func).parameters.values():
            if param.kind in (param.VAR_POSITIONAL, param.VAR_KEYWORD):
                continue
            annotation = Any if param.annotation is param.empty else param.annotation
            default = ... if param.default is param.empty else param.default
            fields[param.name] = (annotation, default)
        return create_model(f"{self.name}_args", **fields)

    def declaration(self) -> ToolDeclaration:
        schema = self._args_model.model_json_schema()
        schema.pop("title", None)
        return ToolDeclaration(
            name=self.name, description=self.description, parameters=schema
        )

    def __call__(self, **kwargs: Any) -> Any:
        args = self._args_model.model_validate(kwargs)
        return self.func(**dict(args))
