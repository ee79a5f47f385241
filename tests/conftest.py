import io

import pytest
from rich.console import Console

from console_ui import ConsoleUI


def _write_tree(root, sizes: dict[str, int]):
    """Create files below root, {relative path: size in bytes}"""
    for rel, size in sizes.items():
        path = root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(b"\0" * size)


class ScriptedViewer:
    """Viewer that replays a fixed list of key actions and records output"""

    def __init__(self, actions):
        self.actions = list(actions)
        self.renders = []
        self.prompts = []

    def render(self, rows, selected, status=None):
        self.renders.append((list(rows), selected, status))

    def show_confirmation(self, prompt):
        self.prompts.append(prompt)

    def on_key(self, handler):
        for action in self.actions:
            if not handler(action):
                break


@pytest.fixture
def quiet_ui():
    out = io.StringIO()
    err = io.StringIO()
    ui = ConsoleUI(console=Console(file=out, width=140), error_console=Console(file=err, width=140))
    ui.out, ui.err = out, err
    return ui


@pytest.fixture
def sample_tree(tmp_path):
    _write_tree(
        tmp_path,
        {
            "a.bin": 500,
            "docs/b.bin": 2048,
            "c.bin": 10,
            "docs/deep/d.bin": 1048576,
            "e.bin": 300,
        },
    )
    return tmp_path


@pytest.fixture
def make_tree():
    return _write_tree


@pytest.fixture
def scripted_viewer():
    return ScriptedViewer
