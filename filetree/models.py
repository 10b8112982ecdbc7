"""Pydantic models for the nodes of a virtual file tree."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Any, Literal, Mapping, Union

import json
import yaml
from pydantic import (
    BaseModel,
    ConfigDict,
    Discriminator,
    Field,
    Tag,
    TypeAdapter,
    ValidationError,
    field_validator,
)


class _NodeBase(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., min_length=1, description="Unique among siblings")
    path: str | None = Field(default=None, description="Derived from ancestor names")

    @field_validator("name")
    @classmethod
    def _no_separator(cls, value: str) -> str:
        if "/" in value:
            raise ValueError("name must not contain '/'")
        return value


class File(_NodeBase):
    """Leaf entry of the tree."""

    is_folder: Literal[False] = Field(default=False, alias="isFolder")


class Folder(_NodeBase):
    """Entry owning an ordered list of child nodes."""

    is_folder: Literal[True] = Field(default=True, alias="isFolder")
    children: list[Node] = Field(default_factory=list)


def _node_kind(value: Any) -> str:
    if isinstance(value, Mapping):
        flag = value.get("isFolder", value.get("is_folder", False))
    else:
        flag = getattr(value, "is_folder", False)
    return "folder" if flag else "file"


Node = Annotated[
    Union[Annotated[File, Tag("file")], Annotated[Folder, Tag("folder")]],
    Discriminator(_node_kind),
]
Tree = list[Node]

Folder.model_rebuild()

_tree_adapter: TypeAdapter[list[File | Folder]] = TypeAdapter(Tree)


# ---------------------------------------------------------------------------
# helpers


def coerce_tree(value: Any) -> list[File | Folder]:
    """Normalize supported inputs into a list of root-level nodes.

    Accepts a list of nodes or mappings, a single mapping (one root node),
    YAML/JSON text, or a Path to such a document.
    """
    payload: Any
    if isinstance(value, Mapping):
        payload = [value]
    elif isinstance(value, (list, tuple)):
        payload = list(value)
    elif isinstance(value, (str, bytes)):
        payload = _load_text_payload(value)
    elif isinstance(value, Path):
        payload = _load_text_payload(value.read_text())
    else:
        raise TypeError("Unsupported value for a file tree")
    if isinstance(payload, Mapping):
        payload = [payload]
    try:
        return _tree_adapter.validate_python(payload)
    except ValidationError as exc:
        raise ValueError("Invalid file tree payload") from exc


def dump_tree(tree: list[File | Folder]) -> list[dict[str, Any]]:
    """Return plain data for ``tree`` using the camelCase ``isFolder`` key."""
    return _tree_adapter.dump_python(tree, mode="json", by_alias=True, exclude_none=True)


def _load_text_payload(raw: str | bytes) -> Any:
    """Interpret raw text as YAML first, falling back to JSON."""
    text = raw.decode() if isinstance(raw, bytes) else raw
    try:
        return yaml.safe_load(text) or []
    except yaml.YAMLError:
        return json.loads(text)


__all__ = [
    "File",
    "Folder",
    "Node",
    "Tree",
    "coerce_tree",
    "dump_tree",
]
