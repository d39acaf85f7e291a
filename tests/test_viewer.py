import math
import os

import pytest

from termesh import viewer
from termesh.color import GRAY_LEVELS
from termesh.config import RenderConfig
from termesh.dsl import parse_module
from termesh.scene import DslScene


class FakeScreen:
    def __init__(self, keys=(), size=(12, 30)):
        self.keys = list(keys)
        self.size = size
        self.cells = {}

    def getmaxyx(self):
        return self.size

    def keypad(self, flag):
        pass

    def erase(self):
        self.cells.clear()

    def addstr(self, y, x, text, attr=0):
        self.cells[(y, x)] = text

    def refresh(self):
        pass

    def getch(self):
        return self.keys.pop(0) if self.keys else ord('q')


@pytest.fixture
def app_factory(monkeypatch, tmp_path):
    monkeypatch.setattr(viewer.curses, "curs_set", lambda visibility: None)
    monkeypatch.setattr(viewer, "init_colors", lambda config: [0] * GRAY_LEVELS)

    def make(keys=()):
        scene = DslScene(parse_module("vertex a = -1 0 0\nvertex b = 1 0 0\nline a b\n"),
                         name="segment")
        config = RenderConfig(save_dir=str(tmp_path))
        return viewer.ViewerApp(FakeScreen(keys), scene, config)

    return make


def test_rotation_keys(app_factory):
    app = app_factory()
    app.handle_key(ord('x'))
    app.handle_key(ord('z'))
    app.handle_key(ord('z'))
    assert app.angles == pytest.approx([math.pi / 4, 0.0, math.pi / 2])

    for _ in range(9):
        app.handle_key(ord('y'))
    assert 0.0 <= app.angles[1] < 2 * math.pi

    app.handle_key(ord('r'))
    assert app.angles == [0.0, 0.0, 0.0]


def test_toggles(app_factory):
    app = app_factory()
    app.handle_key(ord('w'))
    assert not app.config.use_fill
    app.handle_key(ord('c'))
    assert not app.config.use_color


def test_run_draws_until_quit(app_factory):
    app = app_factory(keys=[ord('x')])
    app.run()
    assert not app.running
    glyphs = [text for (y, _), text in app.stdscr.cells.items() if y > 0]
    assert glyphs
    assert "segment" in app.stdscr.cells[(0, 0)]


def test_save_key(app_factory, tmp_path):
    app = app_factory()
    app.draw()
    app.handle_key(ord('s'))
    saved = tmp_path / "termesh-0.txt"
    assert saved.exists()
    assert "saved" in app.status
    lines = saved.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 10
    assert all(len(line) == 29 for line in lines)
    assert "\x1b" not in saved.read_text(encoding="utf-8")
    assert os.path.dirname(str(saved)) == str(tmp_path)
