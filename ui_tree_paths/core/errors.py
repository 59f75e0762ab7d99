"""Custom exception hierarchy for UI tree path queries."""

from typing import Optional, Any, Dict


class PathQueryError(Exception):
    """Base exception for all path query errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class PathSyntaxError(PathQueryError):
    """Raised when a path expression or pattern cannot be parsed."""

    def __init__(self, reason: str, text: Optional[str] = None):
        super().__init__(
            reason,
            {"reason": reason, "text": text, "error_code": "PATH_SYNTAX_ERROR"}
        )


class PatternCompileError(PathSyntaxError):
    """Raised when a pattern cannot be realized by the regular expression engine."""

    def __init__(self, reason: str, regex: Optional[str] = None):
        super().__init__(f"Regex error: {reason}", regex)
        self.details["error_code"] = "PATTERN_COMPILE_ERROR"


class AmbiguityError(PathQueryError):
    """Raised when a path that should select one node selects several."""

    def __init__(self, kind: str, count: int):
        super().__init__(
            f"More than one {kind} found",
            {"kind": kind, "count": count, "error_code": "AMBIGUOUS_PATH"}
        )


class DisambiguationError(PathQueryError):
    """Raised when no candidate parameter makes an expression unique."""

    def __init__(self, expression: str, candidates: Optional[list] = None):
        super().__init__(
            "Ambiguous nodes detected!",
            {
                "expression": expression,
                "candidates": list(candidates or []),
                "error_code": "DISAMBIGUATION_FAILED",
            }
        )


class NodeNotFoundError(PathQueryError, ValueError):
    """Raised when a node is not where the caller claims it is."""

    def __init__(self, reason: str):
        super().__init__(
            reason,
            {"reason": reason, "error_code": "NODE_NOT_FOUND"}
        )


class TraversalLimitError(PathQueryError):
    """Raised when descendant expansion exceeds the configured ceiling."""

    def __init__(self, limit: int):
        super().__init__(
            f"Descendant expansion exceeded {limit} nodes",
            {"limit": limit, "error_code": "TRAVERSAL_LIMIT"}
        )


class ConfigurationError(PathQueryError):
    """Raised when configuration is invalid."""

    def __init__(self, reason: str):
        super().__init__(
            f"Invalid configuration: {reason}",
            {"reason": reason, "error_code": "CONFIGURATION_ERROR"}
        )
