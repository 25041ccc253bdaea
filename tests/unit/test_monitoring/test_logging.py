"""ロギング設定テスト"""

from datetime import datetime, timezone
from types import SimpleNamespace

import orjson
import pytest
from loguru import logger

from notifications_core.config.settings import Settings
from notifications_core.monitoring.logging import (
    _json_formatter,
    _serialize,
    configure_logging,
    correlation_id_var,
    setup_logging,
)


def _record(message: str, **extra) -> dict:
    return {
        "time": datetime(2026, 1, 1, tzinfo=timezone.utc),
        "level": SimpleNamespace(name="INFO"),
        "message": message,
        "module": "test_logging",
        "function": "test",
        "line": 1,
        "extra": extra,
        "exception": None,
    }


def _json_lines(output: str) -> list[dict]:
    return [orjson.loads(line) for line in output.splitlines() if line.strip()]


@pytest.mark.unit
class TestContextVars:
    def test_correlation_id_default(self) -> None:
        assert correlation_id_var.get("") == ""

    def test_correlation_id_set_get(self) -> None:
        token = correlation_id_var.set("req-001")
        try:
            assert correlation_id_var.get() == "req-001"
        finally:
            correlation_id_var.reset(token)


@pytest.mark.unit
class TestJsonFormatter:
    """JSONフォーマッタのテスト"""

    def test_fields(self) -> None:
        token = correlation_id_var.set("req-002")
        try:
            entry = orjson.loads(_serialize(_record("通知送信成功", channel="email")))
        finally:
            correlation_id_var.reset(token)
        assert entry["message"] == "通知送信成功"
        assert entry["level"] == "INFO"
        assert entry["correlation_id"] == "req-002"
        assert entry["channel"] == "email"

    def test_formatter_returns_template(self) -> None:
        record = _record("payload {x}")
        assert _json_formatter(record) == "{extra[serialized]}\n"
        assert orjson.loads(record["extra"]["serialized"])["message"] == "payload {x}"


@pytest.mark.unit
class TestSetupLogging:
    def test_setup_dev_output(self) -> None:
        setup_logging(level="DEBUG", json_output=False)

    def test_json_output_written(self, capsys: pytest.CaptureFixture[str]) -> None:
        setup_logging(level="INFO", json_output=True)
        logger.bind(channel="sms").info("送信 {}", "ok")

        entries = _json_lines(capsys.readouterr().out)
        assert entries[-1]["message"] == "送信 ok"
        assert entries[-1]["channel"] == "sms"

    @pytest.mark.parametrize(
        "text",
        ["</b> closing tag from provider", "<html><body>503</body></html>", "a < b", "{not a field}"],
    )
    def test_markup_and_braces_kept(self, capsys: pytest.CaptureFixture[str], text: str) -> None:
        """HTMLを含むエラー本文でもレコードが欠落しない"""
        setup_logging(level="INFO", json_output=True)
        logger.error("error={}", text)

        captured = capsys.readouterr()
        entries = _json_lines(captured.out)
        assert entries[-1]["message"] == f"error={text}"
        assert "Logging error" not in captured.err

    def test_level_filters(self, capsys: pytest.CaptureFixture[str]) -> None:
        setup_logging(level="WARNING", json_output=True)
        logger.info("表示されない")
        logger.warning("表示される")

        messages = [entry["message"] for entry in _json_lines(capsys.readouterr().out)]
        assert messages == ["表示される"]


@pytest.mark.unit
class TestConfigureLogging:
    def test_applies_settings(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging(Settings(app_log_level="error", log_json_output=True))
        logger.warning("抑制")
        logger.error("出力")

        messages = [entry["message"] for entry in _json_lines(capsys.readouterr().out)]
        assert messages == ["出力"]
