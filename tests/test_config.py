"""
测试配置 — LanguageSettings, initialize(), main.load_config()
"""

import json
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(ROOT))

from xl_language.settings import LanguageSettings, initialize, initialize_async  # noqa: E402


class TestLanguageSettings:

    def test_defaults(self):
        s = LanguageSettings.from_dict(None)
        assert s.language_dir == "Language"
        assert s.default_language == "Chinese"
        assert s.async_switch is False

    def test_unknown_keys_ignored(self):
        s = LanguageSettings.from_dict({"default_language": "English", "colour": "blue"})
        assert s.default_language == "English"

    def test_relative_directory(self, tmp_path):
        s = LanguageSettings(language_dir="langs")
        assert s.resolve_directory(tmp_path) == tmp_path / "langs"

    def test_absolute_directory(self, tmp_path):
        s = LanguageSettings(language_dir=str(tmp_path / "abs"))
        assert s.resolve_directory("/elsewhere") == tmp_path / "abs"

    def test_initialize(self, tmp_path):
        (tmp_path / "Language").mkdir()
        (tmp_path / "Language" / "English.json").write_text(
            json.dumps({"App": {"Name": "Demo"}}), encoding="utf-8"
        )
        settings = LanguageSettings(default_language="English")
        ctrl = initialize(settings, tmp_path)
        try:
            assert ctrl.language_directory == tmp_path / "Language"
            assert ctrl.current_language == "English"
            assert ctrl.text("App.Name") == "Demo"
        finally:
            ctrl.close()


class TestLoadConfig:

    def test_reads_yaml(self, tmp_path):
        from main import load_config
        path = tmp_path / "settings.yaml"
        path.write_text("language:\n  default_language: English\n", encoding="utf-8")
        assert load_config(path) == {"language": {"default_language": "English"}}

    def test_missing_or_empty(self, tmp_path):
        from main import load_config
        assert load_config(tmp_path / "nope.yaml") == {}
        empty = tmp_path / "empty.yaml"
        empty.write_text("", encoding="utf-8")
        assert load_config(empty) == {}

    def test_bundled_config(self):
        from main import load_config
        config = load_config()
        settings = LanguageSettings.from_dict(config.get("language"))
        assert settings.default_language == "Chinese"
        assert settings.resolve_directory(ROOT).is_dir()


class TestScalarLanguageSection:

    def test_language_name_shorthand(self):
        s = LanguageSettings.from_dict("English")
        assert s.default_language == "English"
        assert s.language_dir == "Language"

    def test_other_values_use_defaults(self, caplog):
        with caplog.at_level("WARNING"):
            s = LanguageSettings.from_dict(["English"])
        assert s == LanguageSettings()
        assert "using defaults" in caplog.text

    def test_shorthand_from_yaml(self, tmp_path):
        from main import load_config
        path = tmp_path / "settings.yaml"
        path.write_text("language: English\n", encoding="utf-8")
        s = LanguageSettings.from_dict(load_config(path).get("language"))
        assert s.default_language == "English"


class TestInitializeAsync:

    def test_loads_default_in_background(self, tmp_path):
        (tmp_path / "Language").mkdir()
        (tmp_path / "Language" / "English.json").write_text(
            json.dumps({"App": {"Name": "Demo"}}), encoding="utf-8"
        )
        ctrl, future = initialize_async(LanguageSettings(default_language="English"), tmp_path)
        try:
            assert future.result(timeout=5) is True
            assert ctrl.is_loaded
            assert ctrl.current_language == "English"
            assert ctrl.text("App.Name") == "Demo"
        finally:
            ctrl.close()

    def test_missing_default_stays_unloaded(self, tmp_path):
        ctrl, future = initialize_async(LanguageSettings(default_language="English"), tmp_path)
        try:
            assert future.result(timeout=5) is False
            assert not ctrl.is_loaded
            assert ctrl.current_language == "English"
            assert ctrl.text("App.Name") == "[App.Name]"
        finally:
            ctrl.close()
