"""
Workflow Data CLI

Runs the workflow_data steps of a YAML workflow file against a static
data store kept in a JSON file.

Usage:
    workflow-data workflow.yml
    workflow-data workflow.yml -d store.json --verbose
"""

import argparse
import sys
from pathlib import Path

import yaml
from rich import box
from rich.panel import Panel
from rich.text import Text

from workflow_data.config import (
    WORKFLOW_TYPE,
    WORKFLOW_VERSION,
    load_config,
    resolve_data_file,
    validate_workflow_file,
)
from workflow_data.context import ExecutionContext, load_static_data, save_static_data
from workflow_data.display import Display, get_display
from workflow_data.errors import WorkflowDataError
from workflow_data.workflow import WorkflowRunner


def _fail(message: str) -> None:
    """Print an error line and exit with status 1."""
    get_display().console.print()
    get_display().console.print(f"[bold red]✗ {message}[/bold red]", highlight=False)
    get_display().console.print()
    sys.exit(1)


def main() -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Read and write workflow static data",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Examples:
    workflow-data workflow.yml
    workflow-data workflow.yml -d store.json
    workflow-data workflow.yml --verbose --no-save

Workflow files:
    - Required: type: {WORKFLOW_TYPE}
    - Required: version: {WORKFLOW_VERSION}
        """,
    )
    parser.add_argument(
        "workflow_file",
        help="Path to the workflow YAML file",
    )
    parser.add_argument(
        "-d",
        "--data",
        dest="data_file",
        default=None,
        help="Static data JSON file (default: data_file from the workflow, "
        "else .workflow_data.json next to it)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Trace every key that is read, written or deleted",
    )
    parser.add_argument(
        "--no-save",
        action="store_true",
        default=False,
        help="Do not write static data back after the run",
    )

    args = parser.parse_args()

    # Configure display mode (must be done before any display calls)
    Display.verbose = args.verbose
    Display.reset()

    workflow_file = Path(args.workflow_file).resolve()

    is_valid, error_msg = validate_workflow_file(workflow_file)
    if not is_valid:
        get_display().console.print()
        error_panel = Panel(
            Text.from_markup(
                f"[bold red]✗ Invalid workflow file![/bold red]\n\n"
                f"[white]File:[/white] [cyan]{workflow_file}[/cyan]\n\n"
                f"[white]Error:[/white] {error_msg}\n\n"
                f"[white]Required fields:[/white]\n"
                f"  [cyan]type: {WORKFLOW_TYPE}[/cyan]\n"
                f"  [cyan]version: {WORKFLOW_VERSION}[/cyan]"
            ),
            title="[bold red]Error[/bold red]",
            border_style="red",
            box=box.ROUNDED,
            expand=False,
        )
        get_display().console.print(error_panel)
        get_display().console.print()
        sys.exit(1)

    try:
        config = load_config(workflow_file)
    except (yaml.YAMLError, ValueError) as e:
        _fail(f"Invalid workflow file: {e}")

    override = Path(args.data_file).resolve() if args.data_file else None
    data_file = resolve_data_file(config, workflow_file, override)

    try:
        static_data = load_static_data(data_file)
    except WorkflowDataError as e:
        _fail(str(e))

    context = ExecutionContext(
        project_path=workflow_file.parent,
        static_data=static_data,
    )

    get_display().print_header(config, data_file)

    runner = WorkflowRunner(config, context)
    if not runner.run():
        sys.exit(1)

    if not args.no_save:
        try:
            save_static_data(data_file, context.static_data)
        except (OSError, TypeError, ValueError) as e:
            _fail(f"Failed to save static data: {e}")


if __name__ == "__main__":
    main()
