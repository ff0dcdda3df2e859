"""Dot/bracket path parsing for workflow data documents.

Turns strings like ``data.person[0].name`` into an ordered sequence of
traversal steps:

- "field.nested" -> [Key field, Key nested]
- "array[0]" -> [Key array, Index 0]
- "obj.arr[1].field" -> [Key obj, Key arr, Index 1, Key field]
- 'obj["a.b"]' -> [Key obj, Key a.b]

Parsing never fails. Anything that does not look like a numeric index is
kept as a literal key.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Tuple, Union


class ContainerKind(Enum):
    """Kind of container a step addresses."""

    MAPPING = "mapping"
    SEQUENCE = "sequence"


@dataclass(frozen=True)
class KeyStep:
    """Object property access."""

    name: str

    @property
    def container(self) -> ContainerKind:
        return ContainerKind.MAPPING

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class IndexStep:
    """Array element access."""

    position: int

    @property
    def container(self) -> ContainerKind:
        return ContainerKind.SEQUENCE

    def __str__(self) -> str:
        return f"[{self.position}]"


Step = Union[KeyStep, IndexStep]

_INDEX_PATTERN = re.compile(r"^\s*(\d+)\s*$")


@dataclass(frozen=True)
class DocumentPath:
    """Parsed path: a non-empty, ordered tuple of steps."""

    steps: Tuple[Step, ...]
    raw: str = ""

    def __post_init__(self) -> None:
        if not self.steps:
            raise ValueError("A document path needs at least one step")

    def __iter__(self) -> Iterator[Step]:
        return iter(self.steps)

    def __len__(self) -> int:
        return len(self.steps)

    @property
    def leaf(self) -> Step:
        """Final step of the path."""
        return self.steps[-1]

    def __str__(self) -> str:
        return self.raw


def split_segments(raw: str) -> List[str]:
    """Split on dots that are not inside brackets.

    An unclosed bracket swallows the remaining dots.
    """
    segments: List[str] = []
    current = ""
    depth = 0

    for char in raw:
        if char == "[":
            depth += 1
        elif char == "]" and depth > 0:
            depth -= 1
        elif char == "." and depth == 0:
            segments.append(current)
            current = ""
            continue
        current += char

    segments.append(current)
    return segments


def _bracket_step(content: str) -> Step:
    """Build the step for the text between ``[`` and ``]``."""
    match = _INDEX_PATTERN.match(content)
    if match:
        return IndexStep(int(match.group(1)))

    stripped = content.strip()
    if len(stripped) >= 2 and stripped[0] == stripped[-1] and stripped[0] in "'\"":
        return KeyStep(stripped[1:-1])
    return KeyStep(content)


def _parse_segment(segment: str) -> List[Step]:
    """Parse one dot-separated segment into steps, left to right."""
    if "[" not in segment:
        return [KeyStep(segment)]

    steps: List[Step] = []
    literal = ""
    i = 0

    while i < len(segment):
        char = segment[i]

        if char == "[":
            end = segment.find("]", i)
            if end == -1:
                # Unclosed bracket: keep the rest as literal text
                literal += segment[i:]
                break
            if literal:
                steps.append(KeyStep(literal))
                literal = ""
            steps.append(_bracket_step(segment[i + 1 : end]))
            i = end + 1
        else:
            literal += char
            i += 1

    if literal or not steps:
        steps.append(KeyStep(literal))

    return steps


def parse_path(raw: str) -> DocumentPath:
    """Parse a dot/bracket path string. Never raises."""
    steps: List[Step] = []
    for segment in split_segments(raw):
        steps.extend(_parse_segment(segment))
    return DocumentPath(tuple(steps), raw)


def flat_path(raw: str) -> DocumentPath:
    """Path that treats the whole string as one literal key."""
    return DocumentPath((KeyStep(raw),), raw)


def resolve_path(raw: str, dot_notation: bool = True) -> DocumentPath:
    """Parse ``raw`` in dot-notation mode, or wrap it as a flat key."""
    if dot_notation:
        return parse_path(raw)
    return flat_path(raw)
