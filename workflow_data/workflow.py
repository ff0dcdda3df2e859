"""Workflow runner that executes steps against one execution context."""

import time
from typing import Any, Dict, Optional

from .config import Step, WorkflowConfig
from .context import ExecutionContext
from .display import get_display
from .tools import ToolRegistry
from .tools.base import ToolResult


class StepError(Exception):
    """Raised when a step fails and on_error is 'stop'."""

    pass


class WorkflowRunner:
    """Runs workflow steps in order with tool dispatch."""

    def __init__(
        self,
        config: WorkflowConfig,
        context: Optional[ExecutionContext] = None,
    ) -> None:
        self.config = config
        self.context = context or ExecutionContext()

        # Load workflow variables from config
        self.context.update(config.vars)

        self.results: Dict[str, ToolResult] = {}
        self.completed_steps = 0
        self.failed = False

        self._display = get_display()

    def run_step(self, step: Step, step_num: int, total_steps: int) -> ToolResult:
        """Execute a single workflow step.

        Raises:
            StepError: If the step fails and on_error is 'stop'
        """
        step_start_time = time.time()
        step_name = self.context.interpolate(step.name)

        self._display.print_step_start(step_name, step_num, total_steps, step.tool)

        try:
            tool = ToolRegistry.get(step.tool)
            step_dict = self._step_to_dict(step)
            tool.validate_step(step_dict)
        except ValueError as e:
            result = ToolResult(success=False, error=str(e))
        else:
            result = tool.execute(step_dict, self.context)

        step_duration = time.time() - step_start_time
        self.results[step.name] = result

        # Always update the variable, even with empty output, to avoid stale values
        if step.output_var:
            self.context.set(step.output_var, result.output or "")

        self._display.print_step_result(
            result.success,
            step_duration,
            step_name,
            output_var=step.output_var,
            error=result.error,
        )

        if result.success:
            self.completed_steps += 1
            self._display.print_result(result.data or {})
        elif step.on_error == "stop":
            error_msg = result.error or "Step failed"
            raise StepError(f"Step '{step.name}' failed: {error_msg}")
        # on_error == "continue": just proceed to next step

        return result

    def _step_to_dict(self, step: Step) -> Dict[str, Any]:
        """Convert Step dataclass to dict for tool execution."""
        return {
            "name": step.name,
            "tool": step.tool,
            "operation": step.operation,
            "values": step.values,
            "get_all": step.get_all,
            "delete_all": step.delete_all,
            "raw_json": step.raw_json,
            "json_data": step.json_data,
            "options": {"dot_notation": step.options.dot_notation},
            "scope": step.scope,
            "output_var": step.output_var,
            "on_error": step.on_error,
        }

    def run(self) -> bool:
        """Run the complete workflow.

        Returns:
            True if every step either succeeded or was allowed to fail
        """
        start_time = time.time()
        total_steps = len(self.config.steps)

        try:
            for index, step in enumerate(self.config.steps):
                self.run_step(step, index + 1, total_steps)
        except StepError as e:
            self.failed = True
            self._display.print_error(str(e))
        except KeyboardInterrupt:
            self.failed = True
            self._display.print_error("Workflow interrupted")
        finally:
            self._display.print_summary(
                self.completed_steps,
                time.time() - start_time,
                failed=self.failed,
            )

        return not self.failed
