"""Configuration dataclasses and YAML loading for workflow data runs."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

WORKFLOW_TYPE = "workflow-data"
WORKFLOW_VERSION = 1
DEFAULT_DATA_FILE = ".workflow_data.json"


@dataclass
class DataOptions:
    """Addressing options for a workflow_data step."""

    dot_notation: bool = True  # False: keys are literal property names


@dataclass
class Step:
    """A single workflow step."""

    name: str
    tool: str = "workflow_data"
    operation: str = "set"  # get | set | delete
    values: List[Dict[str, Any]] = field(default_factory=list)  # [{key, value}]
    get_all: bool = False
    delete_all: bool = False
    raw_json: bool = False
    json_data: Any = "{}"  # JSON text or mapping, for raw_json
    options: DataOptions = field(default_factory=DataOptions)
    scope: str = "global"  # global | node
    output_var: Optional[str] = None
    on_error: str = "stop"  # stop | continue


@dataclass
class WorkflowConfig:
    """Complete workflow configuration."""

    name: str
    steps: List[Step]
    vars: Dict[str, Any] = field(default_factory=dict)
    data_file: Optional[str] = None


def _parse_step(step_data: Dict[str, Any]) -> Step:
    """Parse a step dictionary into a Step dataclass."""
    options_data = step_data.get("options") or {}

    return Step(
        name=str(step_data["name"]),
        tool=step_data.get("tool", "workflow_data"),
        operation=step_data.get("operation", "set"),
        values=step_data.get("values") or [],
        get_all=step_data.get("get_all", False),
        delete_all=step_data.get("delete_all", False),
        raw_json=step_data.get("raw_json", False),
        json_data=step_data.get("json_data", "{}"),
        options=DataOptions(
            dot_notation=options_data.get("dot_notation", True),
        ),
        scope=step_data.get("scope", "global"),
        output_var=step_data.get("output_var"),
        on_error=step_data.get("on_error", "stop"),
    )


def load_config(workflow_path: Path) -> WorkflowConfig:
    """Load and parse workflow YAML configuration.

    Args:
        workflow_path: Path to the workflow file

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file does not hold a YAML dictionary
    """
    if not workflow_path.exists():
        raise FileNotFoundError(f"Workflow file not found at:\n  {workflow_path}")

    with open(workflow_path, "r") as f:
        data = yaml.safe_load(f)

    if not isinstance(data, dict):
        raise ValueError("Workflow file must contain a YAML dictionary")

    steps = [_parse_step(s) for s in data.get("steps") or []]

    return WorkflowConfig(
        name=str(data.get("name", "Workflow")),
        steps=steps,
        vars=data.get("vars") or {},
        data_file=data.get("data_file"),
    )


def validate_workflow_file(file_path: Path) -> tuple[bool, Optional[str]]:
    """Validate that a file is a valid workflow with required type and version.

    Returns:
        Tuple of (is_valid, error_message). If valid, error_message is None.
    """
    if not file_path.exists():
        return False, f"File not found: {file_path}"

    if not file_path.is_file():
        return False, f"Not a file: {file_path}"

    try:
        with open(file_path, "r") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        return False, f"Invalid YAML: {e}"

    if not isinstance(data, dict):
        return False, "Workflow file must contain a YAML dictionary"

    if data.get("type") != WORKFLOW_TYPE:
        return False, f"Missing or invalid 'type' field (must be '{WORKFLOW_TYPE}')"

    if data.get("version") != WORKFLOW_VERSION:
        return False, f"Missing or invalid 'version' field (must be {WORKFLOW_VERSION})"

    steps = data.get("steps")
    if not isinstance(steps, list) or not steps:
        return False, "Workflow must define a non-empty 'steps' list"

    for index, step in enumerate(steps):
        if not isinstance(step, dict) or not step.get("name"):
            return False, f"Step #{index + 1} requires a 'name' field"

    return True, None


def resolve_data_file(
    config: WorkflowConfig,
    workflow_path: Path,
    override: Optional[Path] = None,
) -> Path:
    """Pick the static data file: CLI override, config entry, or default.

    Relative config paths resolve against the workflow file's directory.
    """
    if override is not None:
        return override

    base_dir = workflow_path.parent
    if config.data_file:
        path = Path(config.data_file)
        return path if path.is_absolute() else base_dir / path
    return base_dir / DEFAULT_DATA_FILE
