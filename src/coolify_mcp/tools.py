"""Operation descriptors for the Coolify MCP catalog."""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Dict, Literal

from pydantic import BaseModel, ConfigDict

HttpMethod = Literal["GET", "POST"]

UUID_PATTERN = (
    "^[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$"
)

_PLACEHOLDER = re.compile(r"\{(\w+)\}")


class ToolParameters(BaseModel):
    """Base parameters schema for MCP tools.

    The model only documents the accepted arguments. Extra fields are allowed so
    that optional arguments reach the remote API untouched.
    """

    model_config = ConfigDict(extra="allow")


@dataclass(frozen=True)
class ToolDefinition:
    """Description of a single remote operation.

    Attributes:
        name: Unique name of the tool.
        family: Resource family the operation belongs to.
        description: Human-readable description of the tool purpose.
        method: HTTP method used for the remote call.
        path_template: Path relative to the API root, with ``{arg}`` placeholders.
        parameters_model: Pydantic model describing the accepted arguments.
        body_fields: Fields sent as the POST body. ``None`` sends every argument.
        additional_info: Documentation extras published with the input schema.
    """

    name: str
    family: str
    description: str
    method: HttpMethod
    path_template: str
    parameters_model: type[ToolParameters]
    body_fields: tuple[str, ...] | None = None
    additional_info: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        required = set(self.required_args)
        for placeholder in self.placeholders:
            if placeholder not in required:
                raise ValueError(
                    f"Tool '{self.name}' path placeholder '{placeholder}' "
                    "must be a required argument"
                )
        for body_field in self.body_fields or ():
            if body_field not in self.argument_shape:
                raise ValueError(
                    f"Tool '{self.name}' body field '{body_field}' is not declared"
                )

    @property
    def placeholders(self) -> list[str]:
        """Names bound by the path template, in template order."""
        return _PLACEHOLDER.findall(self.path_template)

    @property
    def required_args(self) -> tuple[str, ...]:
        """Required argument names in declaration order."""
        return tuple(
            name
            for name, model_field in self.parameters_model.model_fields.items()
            if model_field.is_required()
        )

    @property
    def argument_shape(self) -> Dict[str, Any]:
        """Mapping from argument name to its declared type."""
        return {
            name: model_field.annotation
            for name, model_field in self.parameters_model.model_fields.items()
        }

    def first_missing(self, arguments: Mapping[str, Any]) -> str | None:
        """Return the first required argument absent from ``arguments``.

        ``None`` and the empty string count as absent.
        """
        for name in self.required_args:
            value = arguments.get(name)
            if value is None or (isinstance(value, str) and value == ""):
                return name
        return None

    def resolve_path(self, arguments: Mapping[str, Any]) -> str:
        """Substitute every placeholder with the matching argument value."""
        return _PLACEHOLDER.sub(
            lambda match: str(arguments[match.group(1)]), self.path_template
        )

    def build_body(self, arguments: Mapping[str, Any]) -> Dict[str, Any] | None:
        """Build the JSON body for the request, or ``None`` for GET calls."""
        if self.method != "POST":
            return None
        if self.body_fields is None:
            return dict(arguments)
        return {name: arguments.get(name) for name in self.body_fields}

    def input_schema(self) -> Dict[str, Any]:
        """Return the JSON schema advertised for the tool."""
        schema = self.parameters_model.model_json_schema()
        schema.setdefault("properties", {})
        schema.setdefault("required", [])
        schema.setdefault("examples", [{}])
        if self.additional_info:
            schema["additionalInfo"] = self.additional_info
        return schema

    def metadata(self) -> Dict[str, Any]:
        """Return a discovery-friendly description of the tool."""

        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": self.input_schema(),
        }
