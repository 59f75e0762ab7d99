"""
Path expression evaluator.

A path is a ``|`` separated list of segments applied, left to right, to a
frontier of roots:

- ``**`` replaces the frontier by all of its descendants (roots included)
- ``..`` replaces every entry by its parent
- ``.#min..max`` keeps a 1-based slice (negative numbers count from the end)
- ``.!param`` / ``.!!param`` sorts by a parameter, ascending / descending
- ``.`` and ``.&param=value`` filter the frontier itself
- anything else is a filter on the children of the frontier:
  ``namePattern&param=valuePattern&...``

Several lines are evaluated independently and their results concatenated.
"""

import re
from typing import List, Optional, Sequence, Tuple

from .errors import AmbiguityError, PathSyntaxError, TraversalLimitError
from .pattern import PathPattern, compile_pattern
from ..nodes.base import PathNode, PathRoot, SingletonChildRoot
from ..types.models import EngineSettings
from ..utils.logger import LogLevel, PathQueryLogger, get_logger

_LINE_BREAK = re.compile(r"[\r\n]+")
_INDEX_SELECT = re.compile(r"\.#(-?[0-9]+)(?:\.\.(-?[0-9]+))?\|")

# (parameter name, pattern); "" tests the node name
Clause = Tuple[str, PathPattern]


class PathEvaluator:
    """Evaluates path expressions against a frontier of roots."""

    def __init__(
        self,
        settings: Optional[EngineSettings] = None,
        logger: Optional[PathQueryLogger] = None,
    ):
        """
        Initialize the evaluator.

        Args:
            settings: Engine settings, defaults to ``EngineSettings()``
            logger: Logger instance, defaults to a quiet category logger
        """
        self.settings = settings or EngineSettings()
        self.logger = logger or get_logger(self.settings.verbose, component="evaluator")

    def evaluate(self, path: str, *roots: Optional[PathRoot]) -> List[PathNode]:
        """
        Evaluate ``path`` starting from ``roots``.

        Args:
            path: Path expression, possibly spanning several lines
            *roots: Roots to start from

        Returns:
            Matching nodes in frontier order

        Raises:
            PathSyntaxError: If the path cannot be parsed
            TraversalLimitError: If ``**`` expands too many nodes
        """
        if "\n" in path or "\r" in path:
            results: List[PathNode] = []
            for line in _LINE_BREAK.split(path):
                if line:
                    results.extend(self._evaluate_line(list(roots), line))
            return results
        return self._evaluate_line(list(roots), path)

    def evaluate_single(self, root: PathRoot, path: str, kind: str) -> Optional[PathNode]:
        """
        Evaluate ``path`` from ``root`` and return its only result.

        Args:
            root: Root to start from
            path: Path expression
            kind: Name for the kind of node, used in the error message

        Returns:
            The matching node, or ``None`` if nothing matched

        Raises:
            AmbiguityError: If more than one node matched
        """
        nodes = self.evaluate(path, root)
        if not nodes:
            return None
        if len(nodes) != 1:
            self.logger.debug("path:single", "Ambiguous path", path=path, kind=kind, count=len(nodes))
            raise AmbiguityError(kind, len(nodes))
        return nodes[0]

    def _evaluate_line(self, frontier: List[Optional[PathRoot]], path: str) -> List[PathNode]:
        while True:
            if path == "**" or path == "..":
                path += "|."

            if path.startswith("**|"):
                frontier = self._descendants(frontier)
                self.logger.debug("path:descendants", "Expanded descendants", count=len(frontier))
                path = path[3:]
                continue

            if path.startswith("..|"):
                frontier = [root.parent if root is not None else None for root in frontier]
                path = path[3:]
                continue

            if path.startswith(".#"):
                if "|" not in path:
                    path += "|."
                m = _INDEX_SELECT.match(path)
                if m:
                    frontier = _select_range(frontier, m.group(1), m.group(2))
                    self.logger.debug("path:select", "Selected range", selector=m.group(0)[:-1], count=len(frontier))
                    path = path[m.end():]
                    continue

            elif path.startswith(".!"):
                if "|" not in path:
                    path += "|."
                pos = path.index("|")
                frontier = _sort_frontier(frontier, path[2:pos])
                path = path[pos + 1:]
                continue

            elif path == "." or path.startswith(".|") or path.startswith(".&"):
                frontier = [SingletonChildRoot(root) for root in frontier]
                path = "*" + path[1:]
                continue

            clauses, rest = parse_filter(path)
            matched = _filter_children(frontier, clauses)
            if self.logger.enabled(LogLevel.DEBUG):
                self.logger.debug(
                    "path:filter",
                    "Filtered children",
                    segment=path if rest is None else path[:len(path) - len(rest) - 1],
                    count=len(matched),
                )
            if rest is None:
                return matched
            frontier = list(matched)
            path = rest

    def _descendants(self, roots: Sequence[Optional[PathRoot]]) -> List[Optional[PathRoot]]:
        """Depth-first pre-order closure of ``roots``, each node once."""
        limit = self.settings.max_descendants
        result: List[Optional[PathRoot]] = []
        seen = set()
        stack = [root for root in reversed(roots) if root is not None]
        while stack:
            node = stack.pop()
            if node in seen:
                continue
            seen.add(node)
            result.append(node)
            if len(result) > limit:
                self.logger.warn("path:descendants", "Descendant limit exceeded", limit=limit)
                raise TraversalLimitError(limit)
            stack.extend(reversed(list(node.children)))
        return result


def parse_filter(path: str) -> Tuple[List[Clause], Optional[str]]:
    """
    Parse a filter segment.

    Args:
        path: Path starting with the segment

    Returns:
        Tuple of (clauses, rest) where ``rest`` is the text after the
        terminating ``|``, or ``None`` if the segment ends the path

    Raises:
        PathSyntaxError: If a parameter clause lacks its equals sign
    """
    current_pattern: Optional[PathPattern] = None
    # None while a parameter name is expected after '&'
    current_name: Optional[str] = ""
    clauses: List[Clause] = []
    rest: Optional[str] = None

    i = 0
    length = len(path)
    while i < length:
        ch = path[i]
        if ch == "=" and current_name is None:
            current_name = current_pattern.text if current_pattern is not None else ""
            current_pattern = None
            i += 1
        elif ch == "&":
            if current_name is None:
                raise PathSyntaxError("Missing equals sign", path)
            if current_pattern is None:
                current_pattern = PathPattern.from_text("")
            clauses.append((current_name, current_pattern))
            current_name = None
            current_pattern = None
            i += 1
        elif ch == "|":
            rest = path[i + 1:]
            break
        else:
            current_pattern, i, _ = compile_pattern(path, i, stop_at_equals=current_name is None)

    if current_name is None:
        raise PathSyntaxError("Missing equals sign", path)
    if current_pattern is None:
        current_pattern = PathPattern.from_text("")
    clauses.append((current_name, current_pattern))
    return clauses, rest


def _filter_children(frontier: Sequence[Optional[PathRoot]], clauses: List[Clause]) -> List[PathNode]:
    result: List[PathNode] = []
    for root in frontier:
        if root is None:
            continue
        for node in root.children:
            if all(
                pattern.is_match(node.node_name if name == "" else node.get_parameter(name))
                for name, pattern in clauses
            ):
                result.append(node)
    return result


def _select_range(frontier: List[Optional[PathRoot]], low: str, high: Optional[str]) -> List[Optional[PathRoot]]:
    count = len(frontier)
    if count == 0:
        return []
    minimum = int(low)
    maximum = int(high) if high is not None else minimum

    if minimum < 0:
        minimum += count
    elif minimum > 0:
        minimum -= 1

    if maximum < 0:
        maximum += count
    elif maximum > 0:
        maximum -= 1
    else:
        maximum = count - 1

    if maximum < minimum:
        minimum, maximum = maximum, minimum

    minimum = max(0, min(minimum, count - 1))
    maximum = max(0, min(maximum, count - 1))
    return frontier[minimum:maximum + 1]


def _sort_frontier(frontier: List[Optional[PathRoot]], parameter_name: str) -> List[Optional[PathRoot]]:
    descending = parameter_name.startswith("!")
    if descending:
        parameter_name = parameter_name[1:]

    def sort_key(root: Optional[PathRoot]) -> str:
        if not isinstance(root, PathNode):
            return ""
        if parameter_name == "":
            return root.node_name
        return root.get_parameter(parameter_name)

    keys = [sort_key(root) for root in frontier]
    order = sorted(range(len(frontier)), key=keys.__getitem__, reverse=descending)
    return [frontier[i] for i in order]


def evaluate(path: str, *roots: Optional[PathRoot]) -> List[PathNode]:
    """Evaluate ``path`` from ``roots`` with default settings."""
    return PathEvaluator().evaluate(path, *roots)


def evaluate_single(root: PathRoot, path: str, kind: str) -> Optional[PathNode]:
    """Evaluate ``path`` from ``root`` and return its only result, or ``None``."""
    return PathEvaluator().evaluate_single(root, path, kind)
