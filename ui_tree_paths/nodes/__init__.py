"""Node capability and bundled tree providers."""

from .base import (
    PathRoot,
    PathNode,
    SingletonChildRoot,
    all_parameter_names,
    describe_node,
    node_info,
)
from .snapshot import SnapshotNode, SnapshotRoot
from .filesystem import FileNode
from .process import ProcessNode, ProcessRoot

__all__ = [
    "PathRoot",
    "PathNode",
    "SingletonChildRoot",
    "all_parameter_names",
    "describe_node",
    "node_info",
    "SnapshotNode",
    "SnapshotRoot",
    "FileNode",
    "ProcessNode",
    "ProcessRoot",
]
