"""Node and root capability required of every queryable tree."""

from abc import ABC, abstractmethod
from typing import Iterable, List, Optional

from ..types.models import NodeInfo

# Returned by providers for attributes that exist but cannot be read
UNREADABLE = "?"


class PathRoot(ABC):
    """
    Starting point of a path query.

    Every ``PathNode`` is a root as well; synthetic roots (e.g. "all
    top-level windows") only implement this class.
    """

    @property
    @abstractmethod
    def children(self) -> List['PathNode']:
        """Ordered children of this root (empty if none)."""
        pass

    @property
    def parent(self) -> Optional['PathRoot']:
        """Parent root, or ``None`` for top-level roots."""
        return None


class PathNode(PathRoot):
    """
    An addressable element of an external tree.

    Implementations must compare equal (and hash equally) when they wrap the
    same external resource, even if the wrapper objects are distinct.
    """

    @property
    @abstractmethod
    def node_name(self) -> str:
        """Default match key of the node."""
        pass

    @property
    @abstractmethod
    def parameter_names(self) -> Iterable[str]:
        """
        Names of the parameters of this node.

        A name ending with an underscore has a space separated list of
        suffixes as its value; each suffix appended to the name is a valid
        parameter name as well.
        """
        pass

    @abstractmethod
    def get_parameter(self, name: str) -> str:
        """
        Return a parameter value.

        Lookup is case-insensitive. Unknown names return ``""``; attributes
        that cannot be read return a sentinel such as ``"?"`` instead of
        raising.
        """
        pass

    @abstractmethod
    def __eq__(self, other: object) -> bool:
        pass

    @abstractmethod
    def __hash__(self) -> int:
        pass


class SingletonChildRoot(PathRoot):
    """Root whose only child is the wrapped root itself, if it is a node."""

    def __init__(self, wrapped: Optional[PathRoot]):
        self.wrapped = wrapped

    @property
    def children(self) -> List[PathNode]:
        if isinstance(self.wrapped, PathNode):
            return [self.wrapped]
        return []


def all_parameter_names(node: PathNode) -> List[str]:
    """
    Return all parameter names of a node, including virtual ones.

    For every parameter whose name ends with ``_`` and whose value is not
    empty, ``name + suffix`` is appended for each space separated suffix of
    the value.

    Args:
        node: Node to inspect

    Returns:
        Parameter names in declaration order, virtual names last
    """
    names = list(node.parameter_names)
    result = list(names)
    for name in names:
        if not name.endswith("_"):
            continue
        value = node.get_parameter(name)
        if value == "":
            continue
        for suffix in value.split(" "):
            result.append(name + suffix)
    return result


def describe_node(node: PathNode) -> NodeInfo:
    """Collect the name and every parameter of ``node``."""
    parameters = {name: node.get_parameter(name) for name in all_parameter_names(node)}
    return NodeInfo(name=node.node_name, parameters=parameters)


def node_info(node: PathNode, parameter: str = "") -> str:
    """Return the node name for ``""``, otherwise the named parameter."""
    if parameter == "":
        return node.node_name
    return node.get_parameter(parameter)
