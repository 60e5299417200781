"""
Exception hierarchy for focusnav.

Only programming errors and malformed input raise. Expected navigation
outcomes (no candidate, blocked exit, stale id references) are reported
through ``FocusDecision`` and never surface as exceptions.
"""

from typing import List, Optional


class FocusNavError(Exception):
    """Base class for all focusnav errors."""


class LayoutError(FocusNavError):
    """
    Raised when a layout document or tree structure is malformed.

    Attributes:
        message: Human-readable error message.
        path: Source file of the layout, if any.
    """

    def __init__(self, message: str, path: Optional[str] = None):
        self.message = message
        self.path = path
        super().__init__(f"{path}: {message}" if path else message)


class CycleError(LayoutError):
    """
    Raised when the containment relation contains a cycle.

    Attributes:
        node_ids: Ids of the nodes taking part in the cycle.
    """

    def __init__(self, node_ids: List[str], path: Optional[str] = None):
        self.node_ids = node_ids
        super().__init__(f"Containment cycle through: {' -> '.join(node_ids)}", path)


class DuplicateNodeError(LayoutError):
    """Raised when two nodes share the same id."""

    def __init__(self, node_id: str, path: Optional[str] = None):
        self.node_id = node_id
        super().__init__(f"Duplicate node id '{node_id}'", path)


class NodeNotFoundError(FocusNavError):
    """
    Raised when a node id that must exist is not part of the tree.

    Attributes:
        node_id: The id that could not be resolved.
    """

    def __init__(self, node_id: str):
        self.node_id = node_id
        super().__init__(f"Node '{node_id}' not found")


class InvalidScopeError(FocusNavError):
    """Raised when the navigation scope is not a node of the tree."""

    def __init__(self, scope_id: str):
        self.scope_id = scope_id
        super().__init__(f"Scope '{scope_id}' is not part of the focus tree")


class UnknownDirectionError(FocusNavError, ValueError):
    """Raised when a direction value is not one of up, down, left, right."""

    def __init__(self, value: object):
        self.value = value
        super().__init__(f"Unknown direction: {value!r}")


class ConfigError(FocusNavError):
    """
    Raised when a configuration file cannot be loaded.

    Attributes:
        path: The offending configuration file.
    """

    def __init__(self, path: str, message: str):
        self.path = path
        self.message = message
        super().__init__(f"Invalid config '{path}': {message}")
