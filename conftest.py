"""Shared fixtures for the path query tests."""

import pytest

from ui_tree_paths import SnapshotRoot

DESKTOP = [
    {
        "name": "Window",
        "parameters": {"title": "Editor", "process": "editor.exe", "state_": "focused visible"},
        "children": [
            {"name": "Button", "parameters": {"title": "OK", "enabled": "1", "id": "1"}},
            {"name": "Button", "parameters": {"title": "Cancel", "enabled": "1", "id": "2"}},
            {"name": "Button", "parameters": {"title": "OK Later", "enabled": "0", "id": "3"}},
            {"name": "Edit", "parameters": {"id": "10"}},
            {"name": "Edit", "parameters": {"id": "11"}},
            {
                "name": "Pane",
                "parameters": {"title": "Toolbar"},
                "children": [
                    {"name": "Button", "parameters": {"title": "Save", "id": "20"}},
                    {"name": "Button", "parameters": {"title": "Open", "id": "21"}},
                ],
            },
        ],
    },
    {
        "name": "Window",
        "parameters": {"title": "Terminal", "process": "term.exe"},
        "children": [
            {"name": "Edit", "parameters": {"id": "30"}},
        ],
    },
]


@pytest.fixture
def desktop():
    """Two top-level windows with controls."""
    return SnapshotRoot.from_data(DESKTOP)


@pytest.fixture
def editor(desktop):
    """The editor window node."""
    return desktop.children[0]
