"""
Layout documents.

A layout is a YAML (or JSON) snapshot of a render tree: the rectangles and
navigation attributes of every element. It is the concrete tree-adapter
input used by the CLI and the tests, standing in for a live renderer.

Example:
    ```yaml
    root: page
    nodes:
      - id: btn-top
        rect: [0, 0, 100, 50]
      - id: row
        container: true
        autofocus: true
        block_exit: up
        children:
          - {id: btn-1, rect: [0, 100, 100, 150]}
          - {id: btn-2, rect: [100, 100, 200, 150]}
      - id: btn-late
        parent: row
        rect: [200, 100, 300, 150]
    ```

Nodes may nest through ``children`` or reference a ``parent`` by id (flat
dumps). Top-level nodes without a parent hang off a synthetic document root.
"""

import logging
from pathlib import Path
from typing import Any, List, Optional, Tuple, Union

import yaml
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError, field_validator

from .core.exceptions import LayoutError
from .core.tree import FocusTree
from .core.types import Direction, FocusNode, Rect

logger = logging.getLogger(__name__)

DEFAULT_ROOT_ID = "document"


def _split_words(value: Any) -> Any:
    # "a b c" is accepted wherever a list of ids or directions is expected
    if isinstance(value, str):
        return value.split()
    return value


class LayoutNode(BaseModel):
    """One element of a layout document."""
    id: str
    rect: Rect = Field(default_factory=Rect)
    tab_rank: Optional[int] = Field(default=None, validation_alias=AliasChoices("tab_rank", "tabindex"))
    container: bool = False
    autofocus: bool = False
    destinations: List[str] = Field(default_factory=list)
    block_exit: List[Direction] = Field(default_factory=list)
    focus: Optional[str] = None
    ignore: bool = False
    disabled: bool = False
    overlap_threshold: Optional[float] = None
    parent: Optional[str] = None
    children: List["LayoutNode"] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid")

    @field_validator("rect", mode="before")
    @classmethod
    def _coerce_rect(cls, value: Any) -> Any:
        if value is None:
            return Rect()
        if isinstance(value, (list, tuple)):
            if len(value) != 4:
                raise ValueError("rect list must be [left, top, right, bottom]")
            left, top, right, bottom = value
            return {"left": left, "top": top, "right": right, "bottom": bottom}
        if isinstance(value, dict) and "width" in value:
            left = value.get("x", value.get("left", 0))
            top = value.get("y", value.get("top", 0))
            return {
                "left": left,
                "top": top,
                "right": left + value["width"],
                "bottom": top + value.get("height", 0),
            }
        return value

    @field_validator("destinations", mode="before")
    @classmethod
    def _coerce_words(cls, value: Any) -> Any:
        return _split_words(value)

    @field_validator("block_exit", mode="before")
    @classmethod
    def _coerce_directions(cls, value: Any) -> Any:
        value = _split_words(value)
        if isinstance(value, (list, tuple, set)):
            return [Direction.parse(item) for item in value]
        return value

    def _effective_tab_rank(self) -> int:
        # Containers are grouping boxes, not focus targets, unless told otherwise
        if self.tab_rank is not None:
            return self.tab_rank
        return -1 if self.container else 0

    def to_focus_node(self) -> FocusNode:
        return FocusNode(
            id=self.id,
            rect=self.rect,
            tab_rank=self._effective_tab_rank(),
            is_container=self.container,
            autofocus=self.autofocus,
            destinations=self.destinations,
            block_exit=set(self.block_exit),
            last_focused_child_id=self.focus,
            ignored=self.ignore or self.disabled,
            overlap_threshold=self.overlap_threshold,
        )


class LayoutDocument(BaseModel):
    """Top level of a layout file."""
    root: str = DEFAULT_ROOT_ID
    nodes: List[LayoutNode] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid")


def _flatten(
    nodes: List[LayoutNode],
    enclosing: Optional[str],
    out: List[Tuple[LayoutNode, Optional[str]]],
) -> None:
    for node in nodes:
        if enclosing is not None and node.parent is not None and node.parent != enclosing:
            raise LayoutError(
                f"Node '{node.id}' is nested in '{enclosing}' but declares parent '{node.parent}'"
            )
        out.append((node, node.parent or enclosing))
        _flatten(node.children, node.id, out)


def parse_layout(data: Union[dict, list], path: Optional[str] = None) -> FocusTree:
    """
    Build a validated ``FocusTree`` from parsed layout data.

    Args:
        data: A mapping with ``nodes`` (and optional ``root``), or a bare
            list of nodes.
        path: Source file, used in error messages.

    Raises:
        LayoutError: If the document does not describe a valid tree.
    """
    if isinstance(data, list):
        data = {"nodes": data}
    if not isinstance(data, dict):
        raise LayoutError("layout must be a mapping or a list of nodes", path)

    try:
        document = LayoutDocument.model_validate(data)
    except ValidationError as e:
        raise LayoutError(str(e), path) from e

    flat: List[Tuple[LayoutNode, Optional[str]]] = []
    _flatten(document.nodes, None, flat)

    tree = FocusTree(FocusNode(id=document.root, tab_rank=-1, is_container=False))
    for entry, _ in flat:
        try:
            tree.add_node(entry.to_focus_node())
        except ValidationError as e:
            raise LayoutError(str(e), path) from e

    # Attach after every node exists so flat dumps may reference forward
    for entry, parent_id in flat:
        parent_id = parent_id or document.root
        if parent_id not in tree:
            raise LayoutError(f"Node '{entry.id}' references unknown parent '{parent_id}'", path)
        tree.attach(entry.id, parent_id)

    tree.validate()
    logger.debug("Parsed layout %s with %d nodes", path or "<data>", len(tree))
    return tree


def load_layout(path: Union[str, Path]) -> FocusTree:
    """
    Load a layout file (YAML or JSON).

    Raises:
        LayoutError: If the file is missing, unreadable or malformed.
    """
    path = Path(path)
    if not path.exists():
        raise LayoutError("file not found", str(path))

    try:
        data = yaml.safe_load(path.read_text())
    except yaml.YAMLError as e:
        raise LayoutError(f"not valid YAML/JSON ({e})", str(path)) from e

    if data is None:
        raise LayoutError("layout is empty", str(path))
    return parse_layout(data, str(path))
