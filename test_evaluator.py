"""Tests for path evaluation."""

import pytest

from ui_tree_paths import (
    AmbiguityError,
    EngineSettings,
    NodeSnapshot,
    PathEvaluator,
    PathSyntaxError,
    PatternCompileError,
    SnapshotRoot,
    TraversalLimitError,
    evaluate,
    evaluate_single,
)


def names(nodes):
    return [node.node_name for node in nodes]


def titles(nodes):
    return [node.get_parameter("title") for node in nodes]


def ids(nodes):
    return [node.get_parameter("id") for node in nodes]


def make_roots(*titles_):
    root = SnapshotRoot.from_data([
        {"name": f"Item{index}", "parameters": {"title": title}}
        for index, title in enumerate(titles_, start=1)
    ])
    return root.children


class TestFilterSegments:
    def test_top_level_names(self, desktop):
        assert titles(evaluate("Window", desktop)) == ["Editor", "Terminal"]

    def test_parameter_filter_then_children(self, desktop):
        buttons = evaluate("Window&title=Editor|Button", desktop)
        assert titles(buttons) == ["OK", "Cancel", "OK Later"]

    def test_all_clauses_must_match(self, desktop):
        nodes = evaluate("Window&title=Editor|Button&enabled=1&title=OK*", desktop)
        assert titles(nodes) == ["OK"]

    def test_results_are_root_major(self, desktop):
        assert ids(evaluate("*|Edit", desktop)) == ["10", "11", "30"]

    def test_numeric_range_on_parameter(self, desktop):
        nodes = evaluate("*|Button&id={#2..3}", desktop)
        assert titles(nodes) == ["Cancel", "OK Later"]

    def test_parameter_names_are_case_insensitive(self, desktop):
        assert titles(evaluate("Window&TITLE=Term*", desktop)) == ["Terminal"]

    def test_virtual_flag_parameter(self, desktop):
        assert titles(evaluate("Window&state_focused=1", desktop)) == ["Editor"]

    def test_missing_parameter_is_empty(self, desktop):
        assert ids(evaluate("*|Edit&title=", desktop)) == ["10", "11", "30"]

    def test_no_match(self, desktop):
        assert evaluate("Dialog", desktop) == []
        assert evaluate("Window|Dialog|Button", desktop) == []

    def test_equals_in_name_pattern_is_literal(self):
        root = SnapshotRoot.from_data([{"name": "a=b"}, {"name": "a"}])
        assert names(evaluate("a=b", root)) == ["a=b"]

    def test_escaped_separator_in_value(self):
        root = SnapshotRoot.from_data([
            {"name": "Item", "parameters": {"title": "Save & Close"}},
            {"name": "Item", "parameters": {"title": "Save"}},
        ])
        assert titles(evaluate("Item&title=Save ^& Close", root)) == ["Save & Close"]

    def test_leading_clause_list_matches_empty_names_only(self):
        root = SnapshotRoot.from_data([
            {"name": "", "parameters": {"title": "x"}},
            {"name": "Named", "parameters": {"title": "x"}},
        ])
        assert names(evaluate("&title=x", root)) == [""]

    def test_trailing_separator_leaves_an_empty_name_filter(self, desktop):
        assert evaluate("Window|", desktop) == []

    def test_multiple_roots(self, desktop):
        windows = desktop.children
        assert ids(evaluate("Edit", *windows)) == ["10", "11", "30"]


class TestSyntaxErrors:
    @pytest.mark.parametrize("path", ["Button&enabled", "Button&", "Window&title=x&id"])
    def test_missing_equals_sign(self, desktop, path):
        with pytest.raises(PathSyntaxError, match="Missing equals sign"):
            evaluate(path, desktop)

    def test_unbalanced_braces(self, desktop):
        with pytest.raises(PathSyntaxError):
            evaluate("Window&title={Editor", desktop)

    def test_regex_error(self, desktop):
        with pytest.raises(PatternCompileError):
            evaluate("Window&title={(}", desktop)

    def test_error_aborts_multi_line_evaluation(self, desktop):
        with pytest.raises(PathSyntaxError):
            evaluate("Window\nWindow&title", desktop)


class TestMultiLine:
    def test_results_are_concatenated(self, desktop):
        nodes = evaluate("Window&title=Terminal|Edit\nWindow&title=Editor|Edit", desktop)
        assert ids(nodes) == ["30", "10", "11"]

    def test_duplicates_are_kept(self, desktop):
        assert len(evaluate("Window\nWindow", desktop)) == 4

    def test_empty_lines_are_ignored(self, desktop):
        nodes = evaluate("\r\n\nWindow&title=Terminal\r\n", desktop)
        assert titles(nodes) == ["Terminal"]


class TestDescendants:
    def test_descendant_filter(self, desktop):
        nodes = evaluate("**|Button", desktop)
        assert titles(nodes) == ["OK", "Cancel", "OK Later", "Save", "Open"]

    def test_bare_descendants_in_pre_order(self, desktop):
        nodes = evaluate("**", desktop)
        assert names(nodes) == [
            "Window", "Button", "Button", "Button", "Edit", "Edit",
            "Pane", "Button", "Button", "Window", "Edit",
        ]

    def test_descendants_in_the_middle(self, desktop):
        nodes = evaluate("Window&title=Editor|**|Button&title=Save", desktop)
        assert titles(nodes) == ["Save"]

    def test_shared_node_is_visited_once(self):
        shared = NodeSnapshot(name="Shared")
        first = NodeSnapshot(name="A", children=[shared])
        second = NodeSnapshot(name="B", children=[shared])
        assert names(evaluate("**", SnapshotRoot([first, second]))) == ["A", "Shared", "B"]

    def test_cycle_terminates(self):
        loop = NodeSnapshot(name="Loop")
        loop.children.append(loop)
        assert names(evaluate("**", SnapshotRoot([loop]))) == ["Loop"]

    def test_descendant_limit(self, desktop):
        evaluator = PathEvaluator(EngineSettings(max_descendants=3))
        with pytest.raises(TraversalLimitError):
            evaluator.evaluate("**|Button", desktop)


class TestParent:
    def test_parent_step(self, desktop):
        nodes = evaluate("Window&title=Editor|Pane|Button|..", desktop)
        assert titles(nodes) == ["Toolbar", "Toolbar"]

    def test_parent_then_filter(self, desktop):
        nodes = evaluate("Window&title=Editor|Pane|..|Edit", desktop)
        assert ids(nodes) == ["10", "11"]

    def test_parent_of_top_level_node_is_dropped(self, desktop):
        assert evaluate("Window|..", desktop) == []
        assert evaluate("Window|..|Window", desktop) == []

    def test_bare_parent(self, desktop):
        buttons = evaluate("Window&title=Editor|Pane|Button", desktop)
        assert titles(evaluate("..", *buttons)) == ["Toolbar", "Toolbar"]


class TestIndexSelect:
    def test_range_of_roots(self):
        roots = make_roots("a", "b", "c", "d", "e")
        assert titles(evaluate(".#2..4|.", *roots)) == ["b", "c", "d"]

    def test_single_index_without_separator(self):
        roots = make_roots("a", "b", "c", "d", "e")
        assert titles(evaluate(".#2", *roots)) == ["b"]

    def test_negative_index_counts_from_the_end(self):
        roots = make_roots("a", "b", "c", "d", "e")
        assert titles(evaluate(".#-1|.", *roots)) == ["e"]
        assert titles(evaluate(".#-2..-1", *roots)) == ["d", "e"]

    def test_zero_maximum_means_last(self):
        roots = make_roots("a", "b", "c", "d", "e")
        assert titles(evaluate(".#1..0|.", *roots)) == ["a", "b", "c", "d", "e"]
        assert titles(evaluate(".#0|.", *roots)) == ["a", "b", "c", "d", "e"]
        assert titles(evaluate(".#3..0", *roots)) == ["c", "d", "e"]

    def test_inverted_bounds_are_swapped(self):
        roots = make_roots("a", "b", "c", "d", "e")
        assert titles(evaluate(".#4..2", *roots)) == ["b", "c", "d"]

    def test_bounds_are_clamped(self):
        roots = make_roots("a", "b", "c")
        assert titles(evaluate(".#2..99", *roots)) == ["b", "c"]
        assert titles(evaluate(".#-10..1", *roots)) == ["a"]

    def test_empty_frontier(self, desktop):
        assert evaluate("Dialog|.#1", desktop) == []

    def test_select_children(self, desktop):
        nodes = evaluate("Window&title=Editor|*|.#2..4", desktop)
        assert names(nodes) == ["Button", "Button", "Edit"]
        assert ids(nodes) == ["2", "3", "10"]

    def test_select_then_continue(self, desktop):
        assert ids(evaluate("Window|.#2|Edit", desktop)) == ["30"]

    def test_malformed_selector_is_a_name_pattern(self, desktop):
        assert evaluate(".#x", desktop) == []


class TestSort:
    def test_ascending(self):
        roots = make_roots("b", "a", "c")
        assert titles(evaluate(".!title|.", *roots)) == ["a", "b", "c"]

    def test_descending(self):
        roots = make_roots("b", "a", "c")
        assert titles(evaluate(".!!title|.", *roots)) == ["c", "b", "a"]

    def test_without_separator(self):
        roots = make_roots("b", "a", "c")
        assert titles(evaluate(".!title", *roots)) == ["a", "b", "c"]

    def test_sort_by_name(self, desktop):
        nodes = evaluate("Window&title=Editor|*|.!", desktop)
        assert names(nodes) == ["Button", "Button", "Button", "Edit", "Edit", "Pane"]

    def test_sort_is_stable(self, desktop):
        nodes = evaluate("Window&title=Editor|*|.!!", desktop)
        assert names(nodes) == ["Pane", "Edit", "Edit", "Button", "Button", "Button"]
        assert ids(nodes)[1:3] == ["10", "11"]
        assert titles(nodes)[3:] == ["OK", "Cancel", "OK Later"]

    def test_sort_then_select(self, desktop):
        nodes = evaluate("Window&title=Editor|Button|.!title|.#1", desktop)
        assert titles(nodes) == ["Cancel"]

    def test_non_node_roots_sort_as_empty(self, desktop):
        editor = desktop.children[0]
        nodes = evaluate(".!|*", editor, desktop)
        assert names(nodes) == ["Window", "Window", "Button", "Button", "Button", "Edit", "Edit", "Pane"]


class TestSelf:
    def test_filter_on_self(self, desktop):
        buttons = evaluate("*|Button", desktop)
        assert titles(evaluate(".&enabled=1", *buttons)) == ["OK", "Cancel"]

    def test_self_returns_nodes(self, desktop):
        windows = desktop.children
        assert evaluate(".", *windows) == windows

    def test_self_then_children(self, desktop):
        editor = desktop.children[0]
        assert ids(evaluate(".|Edit", editor)) == ["10", "11"]

    def test_self_in_the_middle(self, desktop):
        nodes = evaluate("Window|.&process=term.exe|Edit", desktop)
        assert ids(nodes) == ["30"]

    def test_synthetic_root_is_not_a_node(self, desktop):
        assert evaluate(".", desktop) == []


class TestEvaluateSingle:
    def test_single_result(self, desktop):
        node = evaluate_single(desktop, "Window&title=Editor", "window")
        assert node.get_parameter("title") == "Editor"

    def test_no_result(self, desktop):
        assert evaluate_single(desktop, "Window&title=Nope", "window") is None

    def test_ambiguous_result(self, desktop):
        with pytest.raises(AmbiguityError) as exc_info:
            evaluate_single(desktop, "Window", "window")
        assert str(exc_info.value) == "More than one window found"
        assert exc_info.value.details["count"] == 2
