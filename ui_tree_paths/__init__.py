"""
UI Tree Paths - path expressions for labelled trees.

Selects nodes of window, accessibility or any other labelled tree by name,
position or parameter filters, and synthesizes the shortest expression that
selects a given node.
"""

__version__ = "0.1.0"

from .core import (
    PathEvaluator,
    PathPattern,
    compile_pattern,
    evaluate,
    evaluate_single,
    find_best_expression,
    relative_path,
    matches,
    quote,
    PathQueryError,
    PathSyntaxError,
    PatternCompileError,
    AmbiguityError,
    DisambiguationError,
    NodeNotFoundError,
    TraversalLimitError,
    ConfigurationError,
)

from .nodes import (
    PathRoot,
    PathNode,
    SingletonChildRoot,
    SnapshotNode,
    SnapshotRoot,
    FileNode,
    ProcessNode,
    ProcessRoot,
    all_parameter_names,
    describe_node,
    node_info,
)

from .types import EngineSettings, NodeSnapshot, NodeInfo
from .utils import load_settings

__all__ = [
    # Version
    "__version__",
    # Entry points
    "evaluate",
    "evaluate_single",
    "find_best_expression",
    "relative_path",
    "all_parameter_names",
    "describe_node",
    "node_info",
    "quote",
    "matches",
    # Main classes
    "PathEvaluator",
    "PathPattern",
    "compile_pattern",
    "PathRoot",
    "PathNode",
    "SingletonChildRoot",
    "SnapshotNode",
    "SnapshotRoot",
    "FileNode",
    "ProcessNode",
    "ProcessRoot",
    # Types and settings
    "EngineSettings",
    "NodeSnapshot",
    "NodeInfo",
    "load_settings",
    # Errors
    "PathQueryError",
    "PathSyntaxError",
    "PatternCompileError",
    "AmbiguityError",
    "DisambiguationError",
    "NodeNotFoundError",
    "TraversalLimitError",
    "ConfigurationError",
]
