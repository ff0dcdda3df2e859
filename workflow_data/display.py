"""CI-style terminal display for workflow data runs.

Single-line step status, result rendering and optional debug traces,
all printed through one shared Rich console.

Usage:
    from workflow_data.display import get_display

    display = get_display()
    display.print_step_start("Store person", 1, 3, "workflow_data")
    display.print_debug("set: data.person[0].name = 'Alice'")

Debug traces only show when ``Display.verbose`` is True.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict, Optional

from rich.console import Console
from rich.json import JSON
from rich.markup import escape

if TYPE_CHECKING:
    from .config import WorkflowConfig


# Shared console instance
console = Console()


@dataclass
class StatusIcons:
    """Status icons with colors for CI-style display."""

    RUNNING = "[cyan][bold]•[/bold][/cyan]"
    SUCCESS = "[green][bold]✓[/bold][/green]"
    FAILED = "[red][bold]✗[/bold][/red]"


def _format_duration(seconds: float) -> str:
    """Format duration in human-readable format."""
    if seconds < 60:
        return f"{seconds:.1f}s"
    minutes = int(seconds // 60)
    secs = int(seconds % 60)
    return f"{minutes}m {secs:02d}s"


class Display:
    """Display facade shared by the runner, the CLI and the tools."""

    # Global switch - set before running a workflow
    verbose: bool = False

    _instance: Optional["Display"] = None

    @classmethod
    def get_instance(cls) -> "Display":
        """Get or create the singleton display instance."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Reset the singleton instance (useful for testing)."""
        cls._instance = None

    @property
    def console(self) -> Console:
        """Get the Rich console instance."""
        return console

    def print_header(self, config: "WorkflowConfig", data_file: Path) -> None:
        """Print workflow header with the static data location."""
        console.print()
        console.print(f"[bold]Workflow:[/bold] {escape(config.name)}")
        console.print(f"[bold]Static data:[/bold] {data_file}")
        console.print(f"Steps: {len(config.steps)}")
        console.print()

    def print_step_start(
        self,
        step_name: str,
        step_num: int,
        total_steps: int,
        tool: str,
    ) -> None:
        """Format: [•] (1/3) Step name (tool)"""
        console.print(
            f"[{StatusIcons.RUNNING}] ({step_num}/{total_steps}) {escape(step_name)} "
            f"[dim]({tool})[/dim]"
        )

    def print_step_result(
        self,
        success: bool,
        duration: float,
        step_name: str,
        output_var: Optional[str] = None,
        error: Optional[str] = None,
    ) -> None:
        """Print step completion or failure line."""
        duration_str = _format_duration(duration)
        if success:
            line = f"[{StatusIcons.SUCCESS}] {escape(step_name)}"
            if output_var:
                line += f" [dim]-> {output_var}[/dim]"
            console.print(f"{line}  [dim]{duration_str}[/dim]")
            return

        console.print(
            f"[{StatusIcons.FAILED}] {escape(step_name)}  [dim]{duration_str}[/dim]"
        )
        if error:
            console.print(f"    [red]Error: {escape(error)}[/red]")

    def print_result(self, data: Dict[str, Any]) -> None:
        """Render a step's result object as JSON."""
        if not data:
            return
        console.print(JSON.from_data(data, default=str), soft_wrap=True)

    def print_debug(self, message: str) -> None:
        """Print a per-item trace line in verbose mode."""
        if self.verbose:
            console.print(f"    [dim]{escape(message)}[/dim]", highlight=False)

    def print_error(self, message: str) -> None:
        console.print(f"\n[bold red]Error: {escape(message)}[/bold red]")

    def print_summary(
        self,
        completed_steps: int,
        total_elapsed: float,
        failed: bool = False,
    ) -> None:
        """Format: ✓ Workflow complete | 3 steps | 0.2s"""
        console.print()
        console.print("─" * 40)
        duration_str = _format_duration(total_elapsed)
        if failed:
            console.print(
                f"[red]✗ Workflow failed[/red] | {completed_steps} steps | {duration_str}"
            )
        else:
            console.print(
                f"[green]✓ Workflow complete[/green] | {completed_steps} steps | {duration_str}"
            )
        console.print()


def get_display() -> Display:
    """Get the shared display instance."""
    return Display.get_instance()
