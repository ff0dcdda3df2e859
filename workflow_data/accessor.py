"""Read, write and delete values in a document by path.

A document is a dict whose values are scalars, dicts or lists, nested to
any depth. All operations mutate (or read) the given root in place and
never copy it.
"""

from typing import Any, Dict, List, Optional, Union

from .paths import ContainerKind, DocumentPath, IndexStep, KeyStep, Step, parse_path


class _Missing:
    """Marker for a path that does not resolve.

    Distinct from ``None``, which is a stored JSON null.
    """

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING = _Missing()

PathLike = Union[str, DocumentPath]


def _as_path(path: PathLike) -> DocumentPath:
    if isinstance(path, DocumentPath):
        return path
    return parse_path(path)


def _root_steps(root: Dict[str, Any], path: PathLike) -> List[Step]:
    """Steps of ``path``, with a leading index rewritten as a root key.

    The root is always a mapping and cannot be replaced, so ``[0]`` at the
    root addresses the key ``"0"``.
    """
    steps = list(_as_path(path))
    first = steps[0]
    if isinstance(first, IndexStep) and isinstance(root, dict):
        steps[0] = KeyStep(str(first.position))
    return steps


def _kind_of(value: Any) -> Optional[ContainerKind]:
    if isinstance(value, dict):
        return ContainerKind.MAPPING
    if isinstance(value, list):
        return ContainerKind.SEQUENCE
    return None


def _empty(kind: ContainerKind) -> Union[Dict[str, Any], List[Any]]:
    if kind is ContainerKind.SEQUENCE:
        return []
    return {}


def _read(container: Any, step: Step) -> Any:
    """Value under one step, or MISSING."""
    if isinstance(step, IndexStep):
        if isinstance(container, list) and step.position < len(container):
            return container[step.position]
        return MISSING

    if isinstance(container, dict):
        return container.get(step.name, MISSING)
    return MISSING


def _write(container: Any, step: Step, value: Any) -> None:
    """Assign under one step. ``container`` already has the step's kind."""
    if isinstance(step, IndexStep):
        missing = step.position + 1 - len(container)
        if missing > 0:
            container.extend([None] * missing)
        container[step.position] = value
    else:
        container[step.name] = value


def get_value(root: Dict[str, Any], path: PathLike, default: Any = MISSING) -> Any:
    """Return the value at ``path``, or ``default`` if any step misses."""
    current: Any = root
    for step in _root_steps(root, path):
        current = _read(current, step)
        if current is MISSING:
            return default
    return current


def set_value(root: Dict[str, Any], path: PathLike, value: Any) -> Dict[str, Any]:
    """Write ``value`` at ``path``, creating intermediate containers.

    An intermediate value of the wrong kind (say a string where a list is
    needed for the next index) is replaced by an empty container.

    Returns:
        The same ``root``, mutated
    """
    steps = _root_steps(root, path)
    current: Any = root

    for step, next_step in zip(steps, steps[1:]):
        child = _read(current, step)
        if _kind_of(child) is not next_step.container:
            child = _empty(next_step.container)
            _write(current, step, child)
        current = child

    _write(current, steps[-1], value)
    return root


def delete_value(root: Dict[str, Any], path: PathLike) -> bool:
    """Remove the value at ``path``.

    Deleting a list element shifts the following elements down by one.

    Returns:
        True if something was removed
    """
    steps = _root_steps(root, path)
    parent: Any = root

    for step in steps[:-1]:
        parent = _read(parent, step)
        if parent is MISSING:
            return False

    leaf = steps[-1]
    if isinstance(leaf, IndexStep):
        if isinstance(parent, list) and leaf.position < len(parent):
            del parent[leaf.position]
            return True
        return False

    if isinstance(parent, dict) and leaf.name in parent:
        del parent[leaf.name]
        return True
    return False


def get_all(root: Dict[str, Any]) -> Dict[str, Any]:
    return root


def delete_all(root: Dict[str, Any]) -> int:
    """Remove every top-level key. Returns how many were removed."""
    count = len(root)
    root.clear()
    return count
