"""Core path query components."""

from .errors import (
    PathQueryError,
    PathSyntaxError,
    PatternCompileError,
    AmbiguityError,
    DisambiguationError,
    NodeNotFoundError,
    TraversalLimitError,
    ConfigurationError,
)
from .pattern import PathPattern, NumericRange, compile_pattern, quote, matches
from .evaluator import PathEvaluator, evaluate, evaluate_single, parse_filter
from .expression import find_best_expression, relative_path

__all__ = [
    # Pattern compiler
    "PathPattern",
    "NumericRange",
    "compile_pattern",
    "quote",
    "matches",
    # Evaluator
    "PathEvaluator",
    "evaluate",
    "evaluate_single",
    "parse_filter",
    # Expression synthesis
    "find_best_expression",
    "relative_path",
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
