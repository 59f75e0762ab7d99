"""Filesystem tree provider."""

import os
from datetime import datetime
from pathlib import Path
from typing import List, Optional, Union

from .base import UNREADABLE, PathNode

PARAMETER_NAMES = [
    "directory",
    "file",
    "type",
    "size",
    "created",
    "modified",
    "accessed",
]


def _format_time(timestamp: float) -> str:
    return datetime.fromtimestamp(timestamp).isoformat(sep=" ", timespec="seconds")


class FileNode(PathNode):
    """Path node for a file or directory; children are directory entries."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(os.path.abspath(path))

    @property
    def node_name(self) -> str:
        return self.path.name

    @property
    def parameter_names(self) -> List[str]:
        return list(PARAMETER_NAMES)

    def get_parameter(self, name: str) -> str:
        key = name.lower()
        try:
            if key == "directory":
                return "1" if self.path.is_dir() else ""
            if key == "file":
                return "1" if self.path.is_file() else ""
            if key == "type":
                if self.path.is_dir():
                    return "Directory"
                return "File" if self.path.is_file() else ""
            if key == "size":
                return str(self.path.stat().st_size) if self.path.is_file() else ""
            if key == "created":
                stat = self.path.stat()
                # st_ctime is the inode change time where no birth time is kept
                return _format_time(getattr(stat, "st_birthtime", stat.st_ctime))
            if key == "modified":
                return _format_time(self.path.stat().st_mtime)
            if key == "accessed":
                return _format_time(self.path.stat().st_atime)
        except OSError:
            return UNREADABLE
        return ""

    @property
    def children(self) -> List['FileNode']:
        try:
            if not self.path.is_dir():
                return []
            entries = sorted(os.listdir(self.path))
        except OSError:
            return []
        return [FileNode(self.path / entry) for entry in entries]

    @property
    def parent(self) -> Optional['FileNode']:
        if self.path.parent == self.path:
            return None
        return FileNode(self.path.parent)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, FileNode) and other.path == self.path

    def __hash__(self) -> int:
        return hash(self.path)

    def __repr__(self) -> str:
        return f"FileNode({str(self.path)!r})"
