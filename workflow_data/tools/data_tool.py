"""Workflow data tool: read and write the workflow's static data.

Operations:
- get: collect values by key into a result object, or the whole document
- set: write values by key, or merge a raw JSON object into the document
- delete: remove values by key, or clear the document

Keys use dot-notation (``data.person[0].name``) unless the step sets
``options.dot_notation: false``, in which case every key is one literal
property name.
"""

import copy
import json
from typing import TYPE_CHECKING, Any, Dict, List

from ..accessor import (
    MISSING,
    delete_all,
    delete_value,
    get_all,
    get_value,
    set_value,
)
from ..context import GLOBAL_SCOPE, NODE_SCOPE
from ..display import get_display
from ..errors import InvalidRawJSONError
from ..merge import merge_raw_json
from ..paths import resolve_path
from .base import BaseTool, ToolResult

if TYPE_CHECKING:
    from ..context import ExecutionContext


class WorkflowDataTool(BaseTool):
    """Get, set and delete values in workflow static data."""

    @property
    def name(self) -> str:
        return "workflow_data"

    def validate_step(self, step: Dict[str, Any]) -> None:
        """Validate workflow_data step configuration."""
        operation = step.get("operation", "set")
        valid_operations = ("get", "set", "delete")
        if operation not in valid_operations:
            raise ValueError(
                f"Invalid operation '{operation}'. "
                f"Must be one of: {', '.join(valid_operations)}"
            )

        scope = step.get("scope") or GLOBAL_SCOPE
        if scope not in (GLOBAL_SCOPE, NODE_SCOPE):
            raise ValueError(
                f"Invalid scope '{scope}'. Must be one of: {GLOBAL_SCOPE}, {NODE_SCOPE}"
            )

        options = step.get("options")
        if options is not None and not isinstance(options, dict):
            raise ValueError("Workflow data 'options' must be a mapping")

        values = step.get("values")
        if values is None:
            return
        if not isinstance(values, list):
            raise ValueError("Workflow data 'values' must be a list")
        for index, item in enumerate(values):
            if not isinstance(item, dict) or "key" not in item:
                raise ValueError(
                    f"Workflow data value #{index + 1} requires a 'key' field"
                )

    def execute(
        self,
        step: Dict[str, Any],
        context: "ExecutionContext",
    ) -> ToolResult:
        """Execute workflow data operation."""
        operation = step.get("operation", "set")
        options = step.get("options") or {}
        dot_notation = options.get("dot_notation", True) is not False

        try:
            document = context.get_static_data(
                step.get("scope") or GLOBAL_SCOPE, step.get("name")
            )
        except ValueError as e:
            return ToolResult(success=False, error=str(e))

        try:
            if operation == "get":
                data = self._operation_get(document, step, context, dot_notation)
            elif operation == "set":
                data = self._operation_set(document, step, context, dot_notation)
            elif operation == "delete":
                data = self._operation_delete(document, step, context, dot_notation)
            else:
                return ToolResult(success=False, error=f"Unknown operation: {operation}")
        except InvalidRawJSONError as e:
            return ToolResult(success=False, error=str(e))

        return ToolResult(success=True, output=json.dumps(data, default=str), data=data)

    def _items(self, step: Dict[str, Any]) -> List[Dict[str, Any]]:
        return step.get("values") or []

    def _operation_get(
        self,
        document: Dict[str, Any],
        step: Dict[str, Any],
        context: "ExecutionContext",
        dot_notation: bool,
    ) -> Dict[str, Any]:
        """Collect requested values into a fresh result object.

        Keys are placed in the result the same way they are addressed in
        the document, so ``a.b`` comes back as ``{"a": {"b": ...}}``.
        Keys that do not resolve are left out.
        """
        display = get_display()

        if step.get("get_all"):
            return copy.deepcopy(get_all(document))

        result: Dict[str, Any] = {}
        for item in self._items(step):
            key = context.interpolate(str(item["key"]))
            path = resolve_path(key, dot_notation)
            value = get_value(document, path)
            if value is MISSING:
                display.print_debug(f"get: {key} not found")
                continue
            display.print_debug(f"get: {key}")
            set_value(result, path, copy.deepcopy(value))

        return result

    def _operation_set(
        self,
        document: Dict[str, Any],
        step: Dict[str, Any],
        context: "ExecutionContext",
        dot_notation: bool,
    ) -> Dict[str, Any]:
        """Write values, or merge raw JSON, into the document."""
        display = get_display()

        if step.get("raw_json"):
            json_data = step.get("json_data", "{}")
            merge_raw_json(document, json_data)
            display.print_debug("set: merged raw JSON")
            return {}

        for item in self._items(step):
            key = context.interpolate(str(item["key"]))
            value = item.get("value", "")
            if isinstance(value, str):
                value = context.interpolate(value)

            set_value(document, resolve_path(key, dot_notation), copy.deepcopy(value))
            display.print_debug(f"set: {key} = {value!r}")

        return {}

    def _operation_delete(
        self,
        document: Dict[str, Any],
        step: Dict[str, Any],
        context: "ExecutionContext",
        dot_notation: bool,
    ) -> Dict[str, Any]:
        """Remove values, or everything, from the document."""
        display = get_display()

        if step.get("delete_all"):
            count = delete_all(document)
            return {"_result": f"{count} values deleted"}

        for item in self._items(step):
            key = context.interpolate(str(item["key"]))
            removed = delete_value(document, resolve_path(key, dot_notation))
            display.print_debug(f"del: {key} ({'removed' if removed else 'not found'})")

        return {}
