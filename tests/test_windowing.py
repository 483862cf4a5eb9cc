from countdown.config.settings import UISettings
from countdown.ui import windowing


class DummyTk:
    def __init__(self):
        self.geometry_value = None
        self.attributes_called = {}
        self.state_value = None
        self.bound = {}
        self.min_size = None

    def winfo_screenwidth(self):
        return 1024

    def winfo_screenheight(self):
        return 600

    def geometry(self, value):
        self.geometry_value = value

    def attributes(self, key, value=None):
        if value is None:
            return self.attributes_called.get(key)
        self.attributes_called[key] = value

    def state(self, value):
        self.state_value = value

    def bind(self, sequence, func):
        self.bound[sequence] = func

    def minsize(self, width, height):
        self.min_size = (width, height)


def test_phone_window_is_centred_and_clamped_to_screen():
    root = DummyTk()
    windowing.apply_window_prefs(root, UISettings())
    assert root.geometry_value == "360x600+332+0"
    assert "-fullscreen" not in root.attributes_called
    assert root.min_size == (240, 320)


def test_fullscreen_linux(monkeypatch):
    monkeypatch.setattr(windowing.sys, "platform", "linux", raising=False)
    root = DummyTk()
    windowing.apply_window_prefs(root, UISettings(fullscreen=True))
    assert root.geometry_value == "1024x600+0+0"
    assert root.attributes_called["-fullscreen"] is True
    assert root.state_value is None
    assert "<Escape>" in root.bound


def test_fullscreen_windows_zoom(monkeypatch):
    monkeypatch.setattr(windowing.sys, "platform", "win32", raising=False)
    root = DummyTk()
    windowing.apply_window_prefs(root, UISettings(fullscreen=True))
    assert root.state_value == "zoomed"


def test_escape_leaves_fullscreen(monkeypatch):
    monkeypatch.setattr(windowing.sys, "platform", "linux", raising=False)
    root = DummyTk()
    windowing.apply_window_prefs(root, UISettings(fullscreen=True))
    assert root.bound["<Escape>"](None) == "break"
    assert root.attributes_called["-fullscreen"] is False


def test_escape_not_bound_in_window_mode():
    root = DummyTk()
    windowing.apply_window_prefs(root, UISettings())
    assert "<Escape>" not in root.bound
