"""Process list provider: a flat tree of the running processes."""

import os
from typing import List, Optional, Union

import psutil

from .base import UNREADABLE, PathNode, PathRoot

PARAMETER_NAMES = ["pid", "priority", "exited", "file", "myself"]


class ProcessNode(PathNode):
    """
    Path node for one process, identified by its PID.

    Parameters:
        pid: Process id
        priority: Nice value
        exited: ``1`` once the process is gone
        file: Path of the executable
        myself: ``1`` for the current process

    A PID with no process behind it has the name ``?`` and empty
    parameters apart from ``pid``.
    """

    def __init__(self, process: Union[int, psutil.Process]):
        if isinstance(process, psutil.Process):
            self.pid = process.pid
            self.process: Optional[psutil.Process] = process
        else:
            self.pid = int(process)
            try:
                self.process = psutil.Process(self.pid)
            except psutil.NoSuchProcess:
                self.process = None

    @property
    def node_name(self) -> str:
        if self.process is None:
            return "?"
        try:
            return self.process.name()
        except psutil.Error:
            return UNREADABLE

    @property
    def parameter_names(self) -> List[str]:
        return list(PARAMETER_NAMES)

    def get_parameter(self, name: str) -> str:
        key = name.lower()
        if key == "pid":
            return str(self.pid)
        if self.process is None:
            return ""
        try:
            if key == "priority":
                return str(self.process.nice())
            if key == "exited":
                return "" if self.process.is_running() else "1"
            if key == "file":
                return self.process.exe()
            if key == "myself":
                return "1" if self.pid == os.getpid() else ""
        except psutil.Error:
            return UNREADABLE
        return ""

    @property
    def children(self) -> List['ProcessNode']:
        return []

    def __eq__(self, other: object) -> bool:
        return isinstance(other, ProcessNode) and other.pid == self.pid

    def __hash__(self) -> int:
        return hash(self.pid)

    def __repr__(self) -> str:
        return f"ProcessNode({self.pid})"


class ProcessRoot(PathRoot):
    """Synthetic root whose children are all running processes."""

    @property
    def children(self) -> List[ProcessNode]:
        return [ProcessNode(process) for process in psutil.process_iter()]
