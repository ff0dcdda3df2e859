"""Workflow Data: path-addressed get/set/delete on workflow static data."""

from .accessor import MISSING, delete_all, delete_value, get_all, get_value, set_value
from .cli import main
from .config import DataOptions, Step, WorkflowConfig, load_config, validate_workflow_file
from .context import ExecutionContext, load_static_data, save_static_data
from .display import Display, get_display
from .errors import InvalidRawJSONError, StaticDataFileError, WorkflowDataError
from .merge import deep_merge, merge_raw_json, parse_raw_json
from .paths import (
    ContainerKind,
    DocumentPath,
    IndexStep,
    KeyStep,
    flat_path,
    parse_path,
    resolve_path,
)
from .tools import BaseTool, ToolRegistry, ToolResult, WorkflowDataTool
from .workflow import StepError, WorkflowRunner

__all__ = [
    # CLI
    "main",
    # Paths
    "ContainerKind",
    "DocumentPath",
    "IndexStep",
    "KeyStep",
    "flat_path",
    "parse_path",
    "resolve_path",
    # Accessor
    "MISSING",
    "delete_all",
    "delete_value",
    "get_all",
    "get_value",
    "set_value",
    # Merge
    "deep_merge",
    "merge_raw_json",
    "parse_raw_json",
    # Errors
    "InvalidRawJSONError",
    "StaticDataFileError",
    "WorkflowDataError",
    # Config
    "DataOptions",
    "Step",
    "WorkflowConfig",
    "load_config",
    "validate_workflow_file",
    # Context
    "ExecutionContext",
    "load_static_data",
    "save_static_data",
    # Display
    "Display",
    "get_display",
    # Tools
    "BaseTool",
    "ToolRegistry",
    "ToolResult",
    "WorkflowDataTool",
    # Workflow
    "StepError",
    "WorkflowRunner",
]
