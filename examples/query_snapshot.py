"""Query an in-memory window tree."""

from ui_tree_paths import (
    AmbiguityError,
    SnapshotRoot,
    describe_node,
    evaluate,
    evaluate_single,
    find_best_expression,
    relative_path,
)

DESKTOP = [
    {
        "name": "Window",
        "parameters": {"title": "Notes - Untitled", "process": "notes.exe"},
        "children": [
            {"name": "Button", "parameters": {"title": "Save", "id": "1"}},
            {"name": "Button", "parameters": {"title": "Save As", "id": "2"}},
            {"name": "Edit", "parameters": {"id": "3"}},
        ],
    },
    {
        "name": "Window",
        "parameters": {"title": "Calculator", "process": "calc.exe"},
        "children": [
            {"name": "Button", "parameters": {"title": str(digit), "id": str(10 + digit)}}
            for digit in range(10)
        ],
    },
]


def main():
    desktop = SnapshotRoot.from_data(DESKTOP)

    print("Digit buttons 3 to 5:")
    for node in evaluate("Window&process=calc.exe|Button&title={#3..5}", desktop):
        print(" ", describe_node(node).non_empty())

    try:
        evaluate_single(desktop, "**|Button&title=Save*", "button")
    except AmbiguityError as e:
        print(f"Expected failure: {e.message}")

    save_as = evaluate_single(desktop, "**|Button&title=Save As", "button")
    notes = save_as.parent
    print("Expression within the window:", find_best_expression(notes, save_as, "title", "id"))
    print("Path from the desktop:", relative_path(save_as, desktop, "title", "id"))


if __name__ == "__main__":
    main()
