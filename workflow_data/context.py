"""Execution context for variables, interpolation and static data."""

import json
import os
import re
import tempfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

from .accessor import MISSING, get_value
from .errors import StaticDataFileError
from .paths import parse_path

# Pattern matches {var_name}, {var.path.to.field} or {var.items[0].field}
_INTERPOLATION_PATTERN = re.compile(
    r"\{([A-Za-z_]\w*)((?:\.\w+|\[\d+\])*)\}"
)

GLOBAL_SCOPE = "global"
NODE_SCOPE = "node"


@dataclass
class ExecutionContext:
    """Holds variables and static data during workflow execution.

    Static data is the long-lived document store the workflow_data tool
    reads and writes. It is keyed by scope: ``"global"`` for the whole
    workflow, ``"node:<step name>"`` for data private to one step.
    """

    project_path: Path = field(default_factory=lambda: Path.cwd())
    variables: Dict[str, Any] = field(default_factory=dict)
    static_data: Dict[str, Dict[str, Any]] = field(default_factory=dict)

    def set(self, name: str, value: Any) -> None:
        """Set a variable value."""
        self.variables[name] = value

    def get(self, name: str, default: Optional[Any] = None) -> Any:
        """Get a variable value with optional default."""
        return self.variables.get(name, default)

    def update(self, variables: Dict[str, Any]) -> None:
        """Update multiple variables at once."""
        self.variables.update(variables)

    def get_static_data(
        self, scope: str = GLOBAL_SCOPE, node_name: Optional[str] = None
    ) -> Dict[str, Any]:
        """Return the static data document for a scope, creating it if needed.

        Args:
            scope: ``"global"`` or ``"node"``
            node_name: Step name, required for the node scope

        Raises:
            ValueError: If the scope is unknown or a node name is missing
        """
        if scope == GLOBAL_SCOPE:
            key = GLOBAL_SCOPE
        elif scope == NODE_SCOPE:
            if not node_name:
                raise ValueError("Node scoped static data requires a node name")
            key = f"{NODE_SCOPE}:{node_name}"
        else:
            raise ValueError(
                f"Invalid scope '{scope}'. Must be one of: {GLOBAL_SCOPE}, {NODE_SCOPE}"
            )
        return self.static_data.setdefault(key, {})

    def _parse_json_if_string(self, value: Any) -> Any:
        """Parse JSON string to object if applicable."""
        if isinstance(value, str):
            try:
                return json.loads(value)
            except (json.JSONDecodeError, ValueError):
                return value
        return value

    def interpolate(self, template: str) -> str:
        """Replace {var} and {var.field[0].subfield} placeholders with values.

        Placeholders whose variable or path does not resolve are left as-is.
        Dict and list values are serialized as JSON.
        """

        def replace_match(match: re.Match) -> str:
            var_name, trail = match.group(1), match.group(2)

            value = self.variables.get(var_name)
            if value is None:
                return match.group(0)

            if trail:
                parsed_value = self._parse_json_if_string(value)
                if not isinstance(parsed_value, (dict, list)):
                    return match.group(0)
                # Wrap so a leading index applies to a list variable
                value = get_value({"_": parsed_value}, parse_path(f"_{trail}"))
                if value is MISSING or value is None:
                    return match.group(0)

            if isinstance(value, (dict, list)):
                return json.dumps(value)
            return str(value)

        return _INTERPOLATION_PATTERN.sub(replace_match, template)


def load_static_data(path: Path) -> Dict[str, Dict[str, Any]]:
    """Read static data from a JSON file. A missing file is an empty store.

    Raises:
        StaticDataFileError: If the file is not valid JSON, or it or one of
            its scopes is not an object
    """
    if not path.exists():
        return {}

    try:
        with open(path, "r") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise StaticDataFileError(path, f"Invalid JSON ({e})") from e

    if not isinstance(data, dict):
        raise StaticDataFileError(path, "Static data must be a JSON object")
    for scope, document in data.items():
        if not isinstance(document, dict):
            raise StaticDataFileError(
                path, f"Static data scope '{scope}' must be a JSON object"
            )
    return data


def save_static_data(path: Path, data: Dict[str, Dict[str, Any]]) -> None:
    """Write static data to a JSON file atomically.

    Values JSON has no type for (dates from YAML) are written as strings.
    """
    # Atomic write: write to temp file, then rename
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, temp_path = tempfile.mkstemp(dir=path.parent, suffix=".tmp", prefix=path.name)
    try:
        with os.fdopen(fd, "w") as f:
            json.dump(data, f, indent=2, default=str)
        os.replace(temp_path, path)
    except Exception:
        if os.path.exists(temp_path):
            os.unlink(temp_path)
        raise
