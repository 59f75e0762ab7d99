"""In-memory tree provider backed by NodeSnapshot models."""

import json
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Union

from .base import PathNode, PathRoot
from ..types.models import NodeSnapshot


class SnapshotNode(PathNode):
    """
    Path node wrapping a NodeSnapshot.

    Two wrappers are equal when they wrap the same snapshot object, so a
    snapshot shared by several parents is a single node.
    """

    def __init__(self, snapshot: NodeSnapshot, parent: Optional['SnapshotNode'] = None):
        self.snapshot = snapshot
        self._parent = parent

    @property
    def node_name(self) -> str:
        return self.snapshot.name

    @property
    def parameter_names(self) -> List[str]:
        return list(self.snapshot.parameters)

    def get_parameter(self, name: str) -> str:
        """
        Return a parameter value, case-insensitively.

        ``<flag>_<suffix>`` resolves to ``"1"`` when ``suffix`` is listed in
        the value of the ``<flag>_`` parameter.
        """
        parameters = self.snapshot.parameters
        key = name.lower()
        if key in parameters:
            return parameters[key]
        for flag_name, value in parameters.items():
            if flag_name.endswith("_") and key.startswith(flag_name) and len(key) > len(flag_name):
                return "1" if key[len(flag_name):] in value.split(" ") else ""
        return ""

    @property
    def children(self) -> List['SnapshotNode']:
        return [SnapshotNode(child, self) for child in self.snapshot.children]

    @property
    def parent(self) -> Optional['SnapshotNode']:
        return self._parent

    def __eq__(self, other: object) -> bool:
        return isinstance(other, SnapshotNode) and other.snapshot is self.snapshot

    def __hash__(self) -> int:
        return id(self.snapshot)

    def __repr__(self) -> str:
        return f"SnapshotNode({self.snapshot.name!r})"


class SnapshotRoot(PathRoot):
    """Synthetic root whose children are the top-level snapshots."""

    def __init__(self, snapshots: Iterable[NodeSnapshot]):
        self.snapshots = list(snapshots)

    @property
    def children(self) -> List[SnapshotNode]:
        return [SnapshotNode(snapshot) for snapshot in self.snapshots]

    @classmethod
    def from_data(cls, data: Union[Dict[str, Any], List[Any]]) -> 'SnapshotRoot':
        """
        Build a root from plain data.

        Args:
            data: One snapshot mapping or a list of them

        Returns:
            SnapshotRoot over the validated snapshots
        """
        if isinstance(data, dict):
            data = [data]
        return cls(NodeSnapshot.model_validate(item) for item in data)

    @classmethod
    def from_json_file(cls, path: Union[str, Path]) -> 'SnapshotRoot':
        """Load a root from a JSON file holding one snapshot or a list."""
        with open(path, "r", encoding="utf-8") as f:
            return cls.from_data(json.load(f))
