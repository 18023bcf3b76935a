"""Unit tests for jvmcmd.config."""

import json
import os
from unittest.mock import patch

import pytest

from jvmcmd.config import (
    LauncherSettings,
    SettingsHolder,
    load_settings,
    parse_bool,
    save_settings,
)


@pytest.fixture(autouse=True)
def _clean_env():
    keys = ["JVMCMD_DYNAMIC_CLASSPATH", "JVMCMD_DEFAULT_CHARSET", "JVMCMD_RUNTIME_LIB_DIR"]
    with patch.dict("os.environ", {k: v for k, v in os.environ.items() if k not in keys}, clear=True):
        yield


class TestParseBool:
    @pytest.mark.parametrize("value", ["1", "true", "TRUE", " yes ", "on"])
    def test_truthy(self, value):
        assert parse_bool(value) is True

    @pytest.mark.parametrize("value", ["0", "false", "No", "off"])
    def test_falsy(self, value):
        assert parse_bool(value, default=True) is False

    def test_unknown_uses_default(self):
        assert parse_bool("maybe", default=True) is True
        assert parse_bool(None) is False


class TestLoadSettings:
    def test_missing_file_gives_defaults(self, tmp_path):
        settings = load_settings(tmp_path / "config.json")
        assert settings.dynamic_classpath is False
        assert settings.default_charset is None

    def test_reads_file(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"dynamic_classpath": True, "default_charset": "utf-8"}))
        settings = load_settings(path)
        assert settings.dynamic_classpath is True
        assert settings.default_charset == "utf-8"

    def test_invalid_file_is_ignored(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text('{"dynamic_classpath": "sometimes"}')
        assert load_settings(path) == LauncherSettings()

    def test_env_overrides_file(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"dynamic_classpath": True}))
        with patch.dict(
            "os.environ",
            {"JVMCMD_DYNAMIC_CLASSPATH": "false", "JVMCMD_RUNTIME_LIB_DIR": "/rt"},
        ):
            settings = load_settings(path)
        assert settings.dynamic_classpath is False
        assert settings.runtime_lib_dir == "/rt"

    def test_env_can_be_skipped(self, tmp_path):
        with patch.dict("os.environ", {"JVMCMD_DEFAULT_CHARSET": "utf-16"}):
            settings = load_settings(tmp_path / "config.json", apply_env=False)
        assert settings.default_charset is None


class TestSaveSettings:
    def test_round_trips_non_default_values(self, tmp_path):
        path = tmp_path / "nested" / "config.json"
        save_settings(LauncherSettings(dynamic_classpath=True), path)
        assert json.loads(path.read_text()) == {"dynamic_classpath": True}
        assert load_settings(path).dynamic_classpath is True


class TestRunnerClasspath:
    def test_jars_in_order(self):
        settings = LauncherSettings(runtime_lib_dir="/rt", runner_jar="r.jar", loader_jar="l.jar")
        assert settings.runner_classpath() == [
            os.path.join("/rt", "r.jar"),
            os.path.join("/rt", "l.jar"),
        ]


class TestSettingsHolder:
    def test_snapshot_is_isolated_from_updates(self):
        holder = SettingsHolder()
        snapshot = holder.snapshot()
        holder.update(dynamic_classpath=True)
        assert snapshot.dynamic_classpath is False
        assert holder.snapshot().dynamic_classpath is True

    def test_mutating_snapshot_does_not_leak(self):
        holder = SettingsHolder()
        holder.snapshot().dynamic_classpath = True
        assert holder.snapshot().dynamic_classpath is False
