"""Synthesis of path expressions that select exactly one node."""

from typing import List, Optional

from .errors import DisambiguationError, NodeNotFoundError
from .evaluator import PathEvaluator
from .pattern import quote
from ..nodes.base import PathNode, PathRoot


def find_best_expression(
    root: PathRoot,
    node: PathNode,
    *param_names: str,
    evaluator: Optional[PathEvaluator] = None,
) -> str:
    """
    Find the shortest expression that selects only ``node`` among the
    children of ``root``.

    The quoted node name is tried first; then, in the given order, every
    parameter with a non-empty value is appended as ``&param=value`` until
    the expression is unique.

    Args:
        root: Root whose children contain ``node``
        node: Node to select
        *param_names: Candidate parameters, most preferred first
        evaluator: Evaluator used to test uniqueness

    Returns:
        A path expression selecting only ``node``

    Raises:
        NodeNotFoundError: If ``node`` is not a child of ``root``
        DisambiguationError: If no candidate parameter makes the expression unique
    """
    evaluator = evaluator or PathEvaluator()

    sample = None
    for child in root.children:
        if child == node:
            sample = child
            break
    if sample is None:
        raise NodeNotFoundError("Node is not a child of the given path root")

    # Names such as "." or ".#1" read as operators, so the result is
    # checked against the node itself and not only counted.
    expression = quote(sample.node_name)
    if evaluator.evaluate(expression, root) == [sample]:
        return expression

    for param in param_names:
        value = sample.get_parameter(param)
        if value == "":
            continue
        expression = f"{expression}&{param}={quote(value)}"
        if evaluator.evaluate(expression, root) == [sample]:
            evaluator.logger.debug("expression:found", "Disambiguated by parameters", expression=expression)
            return expression

    evaluator.logger.debug("expression:ambiguous", "No unique expression", expression=expression)
    raise DisambiguationError(expression, list(param_names))


def relative_path(
    node: PathNode,
    ancestor: PathRoot,
    *param_names: str,
    evaluator: Optional[PathEvaluator] = None,
) -> str:
    """
    Build a ``|`` separated path leading from ``ancestor`` down to ``node``.

    Each step is the best expression of a node relative to its parent. A
    top-level node (no parent) is looked up among the children of
    ``ancestor``, so synthetic roots work as ancestors too.

    Args:
        node: Node to reach
        ancestor: Root the path starts from
        *param_names: Candidate parameters for each step
        evaluator: Evaluator used to test uniqueness

    Returns:
        Path expression from ``ancestor`` to ``node``

    Raises:
        NodeNotFoundError: If ``ancestor`` is not an ancestor of ``node``
        DisambiguationError: If a step cannot be made unique
    """
    evaluator = evaluator or PathEvaluator()
    limit = evaluator.settings.max_descendants

    chain: List[PathNode] = []
    parents: List[PathRoot] = []
    current: Optional[PathRoot] = node
    while True:
        if not isinstance(current, PathNode) or len(chain) >= limit:
            raise NodeNotFoundError("Node is not a descendant of the given ancestor")
        parent = current.parent
        if parent is None:
            if not any(child == current for child in ancestor.children):
                raise NodeNotFoundError("Node is not a descendant of the given ancestor")
            parent = ancestor
        chain.append(current)
        parents.append(parent)
        if parent is ancestor or parent == ancestor:
            break
        current = parent

    steps = [
        find_best_expression(parent, child, *param_names, evaluator=evaluator)
        for parent, child in zip(parents, chain)
    ]
    return "|".join(reversed(steps))
