"""Traversal context for the pagination visitor.

Keeps one frame per field definition that is currently open. The last
frame always describes the field whose subtree is being visited, so
directive handlers can find out which field they belong to.
"""

from dataclasses import dataclass
from typing import Any

from graphql import DirectiveNode, FieldDefinitionNode

from .errors import EmptyStackError


@dataclass
class StackFrame:
    """An open field, its enclosing type and the marker position (if found)."""
    field: FieldDefinitionNode
    parent: Any  # ObjectTypeDefinitionNode, InterfaceTypeDefinitionNode, ...
    marker_index: int | None = None

    @property
    def marker(self) -> DirectiveNode | None:
        """The marker directive, looked up again on the field itself."""
        if self.marker_index is None:
            return None
        directives = self.field.directives or ()
        if 0 <= self.marker_index < len(directives):
            return directives[self.marker_index]
        return None


class FieldStack:
    """LIFO stack of field frames."""

    def __init__(self):
        self._frames: list[StackFrame] = []

    def __len__(self) -> int:
        return len(self._frames)

    def __bool__(self) -> bool:
        return bool(self._frames)

    @property
    def current(self) -> StackFrame:
        """Top frame of the stack."""
        if not self._frames:
            raise EmptyStackError("No field definition is currently open")
        return self._frames[-1]

    def enter_field(self, field: FieldDefinitionNode, parent: Any) -> StackFrame:
        """Open a new field. Called once per field definition, in document order."""
        frame = StackFrame(field=field, parent=parent)
        self._frames.append(frame)
        return frame

    def current_field(self) -> FieldDefinitionNode:
        """Return the field definition being visited."""
        return self.current.field

    def record_marker(self, index: int) -> bool:
        """Remember the marker position on the current field.

        The first marker wins; returns False if one was already recorded.
        """
        frame = self.current
        if frame.marker_index is not None:
            return False
        frame.marker_index = index
        return True

    def leave_field(self) -> StackFrame:
        """Close the current field and return its frame."""
        if not self._frames:
            raise EmptyStackError("Leaving a field definition that was never entered")
        return self._frames.pop()
