import yaml

from countdown.config.settings import Settings, UISettings, config_path


def test_missing_file_gives_defaults_and_writes_them(tmp_path):
    path = tmp_path / "nope" / "config.yaml"
    settings = Settings.load(path)
    assert settings.ui == UISettings()
    assert settings.ui.width == 360 and settings.ui.height == 640
    assert yaml.safe_load(path.read_text(encoding="utf-8"))["ui"]["theme"] == "light"
    assert Settings.load(path) == settings


def test_roundtrip(tmp_path):
    path = tmp_path / "countdown" / "config.yaml"
    settings = Settings()
    settings.ui.theme = "dark"
    settings.ui.toast_ms = 2000
    settings.save(path)

    loaded = Settings.load(path)
    assert loaded.ui.theme == "dark"
    assert loaded.ui.toast_ms == 2000
    assert yaml.safe_load(path.read_text(encoding="utf-8"))["ui"]["theme"] == "dark"


def test_invalid_values_are_coerced(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "ui:\n  theme: neon\n  width: abc\n  height: 99999\n  fullscreen: 'yes'\n  toast_ms: 1\n  extra: 3\n",
        encoding="utf-8",
    )
    ui = Settings.load(path).ui
    assert ui.theme == "light"
    assert ui.width == 360
    assert ui.height == 2160
    assert ui.fullscreen is True
    assert ui.toast_ms == 500


def test_malformed_yaml_falls_back(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("ui: [unclosed\n", encoding="utf-8")
    assert Settings.load(path).ui.theme == "light"


def test_non_mapping_falls_back(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("- just\n- a list\n", encoding="utf-8")
    assert Settings.load(path) == Settings()


def test_env_override(tmp_path, monkeypatch):
    target = tmp_path / "custom.yaml"
    monkeypatch.setenv("COUNTDOWN_CONFIG", str(target))
    assert config_path() == target
    target.write_text("ui:\n  theme: dark\n", encoding="utf-8")
    assert Settings.load().ui.theme == "dark"
