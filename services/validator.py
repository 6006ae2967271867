"""
Schema validation for tool arguments.
Each tool has one declarative pydantic model; a single generic routine checks raw
arguments against it and reports every violation at once.
"""
from collections.abc import Mapping
from typing import Any, Dict, List, Tuple, Type

import pydantic
from pydantic import BaseModel

from models.api_models import ChatCompletionParams, ResponsesParams
from utils.constants import ToolName
from utils.errors import UnknownOperationError, ValidationError
from utils.logger import app_logger


class SchemaValidator:
    """Validates raw tool arguments against the registered schemas."""

    DEFAULT_SCHEMAS: Dict[str, Type[BaseModel]] = {
        ToolName.CHAT_COMPLETION: ChatCompletionParams,
        ToolName.RESPONSES: ResponsesParams,
    }

    def __init__(self, schemas: Dict[str, Type[BaseModel]] | None = None):
        self.schemas = dict(schemas or self.DEFAULT_SCHEMAS)

    def schema_for(self, operation_name: str) -> Type[BaseModel]:
        """Return the schema model registered for an operation."""
        try:
            return self.schemas[operation_name]
        except KeyError:
            raise UnknownOperationError(operation_name) from None

    def validate(self, operation_name: str, raw_arguments: Any) -> BaseModel:
        """
        Check raw arguments against the operation's schema.

        Args:
            operation_name: Registered tool name
            raw_arguments: Untyped argument object from the caller

        Returns:
            Validated parameter model with defaults applied

        Raises:
            ValidationError: listing every (field path, reason) violation
            UnknownOperationError: if no schema is registered for the name
        """
        schema = self.schema_for(operation_name)

        if raw_arguments is None:
            raise ValidationError([("arguments", "Arguments are required")])
        if not isinstance(raw_arguments, Mapping):
            raise ValidationError([("arguments", f"Expected an object, got {type(raw_arguments).__name__}")])

        try:
            return schema.model_validate(dict(raw_arguments))
        except pydantic.ValidationError as e:
            violations = self._collect_violations(e, raw_arguments)
            app_logger.info(f"Rejected arguments for {operation_name}: {len(violations)} violation(s)")
            raise ValidationError(violations) from None

    def json_schema(self, operation_name: str) -> Dict[str, Any]:
        """JSON Schema advertised for an operation's input."""
        return self.schema_for(operation_name).model_json_schema()

    @staticmethod
    def _collect_violations(error: pydantic.ValidationError, raw_arguments: Any) -> List[Tuple[str, str]]:
        """
        Flatten pydantic errors into (dotted field path, reason) pairs.
        Union member tags are removed from the path, and errors raised by a
        member that does not match the submitted value's type are dropped.
        """
        violations: List[Tuple[str, str]] = []
        fallback: List[Tuple[str, str]] = []
        for item in error.errors(include_url=False):
            parts, applies = SchemaValidator._field_path(item.get("loc", ()), raw_arguments)
            violation = (".".join(parts) or "arguments", item.get("msg", "Invalid value"))
            target = violations if applies else fallback
            if violation not in target:
                target.append(violation)
        return violations or fallback

    @staticmethod
    def _field_path(loc: Tuple[Any, ...], raw_arguments: Any) -> Tuple[List[str], bool]:
        """
        Walk an error location over the submitted value.

        Returns:
            Tuple of (field path parts without union tags, whether every
            union member on the way matches the submitted value)
        """
        parts: List[str] = []
        applies = True
        value = raw_arguments
        for part in loc:
            if isinstance(part, int):
                parts.append(str(part))
                value = value[part] if isinstance(value, list) and 0 <= part < len(value) else None
            elif isinstance(value, Mapping) or value is None:
                parts.append(str(part))
                value = value.get(part) if isinstance(value, Mapping) else None
            else:
                # union member tag, e.g. 'str' or 'list[ConversationMessage]'
                applies = applies and SchemaValidator._tag_matches(str(part), value)
        return parts, applies

    @staticmethod
    def _tag_matches(tag: str, value: Any) -> bool:
        if isinstance(value, str):
            return tag == "str"
        if isinstance(value, list):
            return tag.startswith("list")
        return True
