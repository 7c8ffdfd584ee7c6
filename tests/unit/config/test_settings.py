"""Unit tests for config settings & export settings."""
from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import ClassVar

import pytest

from easy_export.application.export import PLACEHOLDER, ExportSettings
from easy_export.config.settings import DotenvSettingsLoader, EnvSettingsLoader, Settings
from easy_export.config.settings.loaders import unescape
from easy_export.config.validation import ConfigError, InvalidSettingValueError, MissingRequiredSettingError


@dataclass(frozen=True)
class TokenSettings(Settings):
    _prefix: ClassVar[str] = "SVC"

    token: str
    retries: int = 3
    ratio: float = 0.5


# ---------------------------------------------------------------------------
# ExportSettings
# ---------------------------------------------------------------------------
class TestExportSettings:
    def test_defaults(self) -> None:
        s = ExportSettings()
        assert s.delimiter == ","
        assert s.line_terminator == "\n"
        assert s.placeholder == PLACEHOLDER
        assert s.strict is False
        assert s.date_format == "%Y-%m-%d"
        assert s.bom is False

    def test_is_frozen(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            ExportSettings().strict = True  # type: ignore[misc]

    @pytest.mark.parametrize("delimiter", ["", ",,", "\t\t"])
    def test_delimiter_must_be_one_character(self, delimiter: str) -> None:
        with pytest.raises(InvalidSettingValueError) as exc:
            ExportSettings(delimiter=delimiter)
        assert exc.value.setting_name == "delimiter"
        assert exc.value.env_key == "EASY_EXPORT_DELIMITER"
        assert exc.value.detail["env_key"] == "EASY_EXPORT_DELIMITER"

    def test_empty_line_terminator_rejected(self) -> None:
        with pytest.raises(InvalidSettingValueError, match="line_terminator"):
            ExportSettings(line_terminator="")

    def test_empty_date_format_rejected(self) -> None:
        with pytest.raises(ConfigError):
            ExportSettings(date_format="")

    def test_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("EASY_EXPORT_DELIMITER", ";")
        monkeypatch.setenv("EASY_EXPORT_STRICT", "true")
        monkeypatch.setenv("EASY_EXPORT_BOM", "0")
        monkeypatch.setenv("EASY_EXPORT_PLACEHOLDER", "n/a")
        s = ExportSettings.from_env()
        assert s.delimiter == ";"
        assert s.strict is True
        assert s.bom is False
        assert s.placeholder == "n/a"
        assert s.date_format == "%Y-%m-%d"

    def test_from_env_unescapes_control_characters(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("EASY_EXPORT_DELIMITER", "\\t")
        monkeypatch.setenv("EASY_EXPORT_LINE_TERMINATOR", "\\r\\n")
        s = ExportSettings.from_env()
        assert s.delimiter == "\t"
        assert s.line_terminator == "\r\n"

    def test_from_env_leaves_backslashes_in_text_fields(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("EASY_EXPORT_PLACEHOLDER", r"N\A err\n")
        monkeypatch.setenv("EASY_EXPORT_DATE_FORMAT", r"%Y\%m")
        s = ExportSettings.from_env()
        assert s.placeholder == r"N\A err\n"
        assert s.date_format == r"%Y\%m"

    def test_from_env_keeps_unknown_escapes_in_delimiter_fields(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("EASY_EXPORT_LINE_TERMINATOR", r"\A\n")
        assert ExportSettings.from_env().line_terminator == "\\A\n"

    def test_from_env_keeps_non_ascii_text(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("EASY_EXPORT_PLACEHOLDER", "Valeur indisponible é")
        assert ExportSettings.from_env().placeholder == "Valeur indisponible é"

    def test_from_env_invalid_value(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("EASY_EXPORT_DELIMITER", ";;")
        with pytest.raises(InvalidSettingValueError):
            ExportSettings.from_env()


# ---------------------------------------------------------------------------
# EnvSettingsLoader
# ---------------------------------------------------------------------------
class TestEnvSettingsLoader:
    def test_missing_required(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("SVC_TOKEN", raising=False)
        with pytest.raises(MissingRequiredSettingError) as exc:
            EnvSettingsLoader().load(TokenSettings)
        assert exc.value.setting_name == "token"
        assert exc.value.env_key == "SVC_TOKEN"
        assert exc.value.detail == {"setting": "token", "env_key": "SVC_TOKEN"}
        assert "SVC_TOKEN" in exc.value.message

    def test_coerces_numbers(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SVC_TOKEN", "abc")
        monkeypatch.setenv("SVC_RETRIES", "7")
        monkeypatch.setenv("SVC_RATIO", "0.25")
        s = EnvSettingsLoader().load(TokenSettings)
        assert (s.token, s.retries, s.ratio) == ("abc", 7, 0.25)

    def test_bad_number(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SVC_TOKEN", "abc")
        monkeypatch.setenv("SVC_RETRIES", "many")
        with pytest.raises(InvalidSettingValueError) as exc:
            EnvSettingsLoader().load(TokenSettings)
        assert exc.value.setting_name == "retries"
        assert exc.value.env_key == "SVC_RETRIES"
        assert exc.value.value == "many"


class TestDotenvSettingsLoader:
    def test_loads_file(self, tmp_path, monkeypatch: pytest.MonkeyPatch) -> None:
        pytest.importorskip("dotenv")
        monkeypatch.delenv("EASY_EXPORT_DELIMITER", raising=False)
        env_file = tmp_path / ".env"
        env_file.write_text("EASY_EXPORT_DELIMITER=|\n")
        try:
            s = DotenvSettingsLoader(str(env_file)).load(ExportSettings)
        finally:
            monkeypatch.delenv("EASY_EXPORT_DELIMITER", raising=False)
        assert s.delimiter == "|"


class TestUnescape:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            (r"\t", "\t"),
            (r"\r\n", "\r\n"),
            (r"a\\b", "a\\b"),
            (r"\A\x41", r"\A\x41"),
            ("plain", "plain"),
        ],
    )
    def test_explicit_escape_map(self, raw: str, expected: str) -> None:
        assert unescape(raw) == expected

    def test_env_key(self) -> None:
        assert ExportSettings.env_key("line_terminator") == "EASY_EXPORT_LINE_TERMINATOR"
        assert Settings.env_key("debug") == "DEBUG"
