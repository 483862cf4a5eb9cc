from countdown.config import theme

PALETTE_KEYS = {
    "COL_BG",
    "COL_CARD",
    "COL_BORDER",
    "COL_TEXT",
    "COL_MUTED",
    "COL_ACCENT",
    "COL_ACCENT_TEXT",
}


class DummyRoot:
    def __init__(self):
        self.options = {}

    def configure(self, **kwargs):
        self.options.update(kwargs)


def test_themes_share_the_keys_the_widgets_read():
    assert theme.list_themes() == ["dark", "light"]
    for name in theme.list_themes():
        theme.set_theme(name)
        assert set(theme.get_current_colors()) == PALETTE_KEYS
    theme.set_theme("light")


def test_apply_theme_paints_background_and_falls_back_to_light():
    root = DummyRoot()
    palette = theme.apply_theme(root, "dark")
    assert root.options["bg"] == palette["COL_BG"] == "#121212"

    palette = theme.apply_theme(root, "sepia")
    assert palette["COL_BG"] == "#FFFFFF"
    assert root.options["bg"] == "#FFFFFF"
