"""Тесты для structlog configuration."""

import json
import logging

import pytest
import structlog

from src.calculator import StringCalculator
from src.config.logging import LOGGER_NAMESPACE, configure_logging
from src.core.domain import NegativeOperand


@pytest.fixture(autouse=True)
def _restore_logging():
    """Восстановление состояния root logger после каждого теста."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    calculator_logger = logging.getLogger(LOGGER_NAMESPACE)
    calculator_level = calculator_logger.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    calculator_logger.setLevel(calculator_level)
    structlog.reset_defaults()


class TestConfigureLogging:
    def test_verbose_enables_debug(self):
        configure_logging(verbose=True)
        assert logging.getLogger(LOGGER_NAMESPACE).level == logging.DEBUG
        assert logging.getLogger().level == logging.WARNING

    def test_non_verbose_sets_warning(self):
        configure_logging(verbose=False)
        assert logging.getLogger(LOGGER_NAMESPACE).level == logging.WARNING

    def test_json_mode_output(self, capfd):
        configure_logging(verbose=True, log_json=True)
        structlog.get_logger("src.test").warning("json test", answer=42)
        captured = capfd.readouterr()
        parsed = json.loads(captured.err.strip())
        assert parsed["event"] == "json test"
        assert parsed["answer"] == 42
        assert parsed["level"] == "warning"
        assert parsed["logger"] == "src.test"
        assert "timestamp" in parsed

    def test_pipeline_debug_events_rendered(self, capfd):
        """stdlib логгеры конвейера проходят через structlog formatter."""
        configure_logging(verbose=True, log_json=True)
        assert StringCalculator().add("1,2") == 3

        lines = [json.loads(line) for line in capfd.readouterr().err.strip().splitlines()]
        loggers = {line["logger"] for line in lines}
        assert "src.calculator.resolver" in loggers
        assert "src.calculator.tokenizer" in loggers
        assert "src.calculator.string_calculator" in loggers
        assert all(line["level"] == "debug" for line in lines)

    def test_validation_failure_logged(self, capfd):
        configure_logging(verbose=True, log_json=True)
        with pytest.raises(NegativeOperand):
            StringCalculator().add("1,-2")

        lines = [json.loads(line) for line in capfd.readouterr().err.strip().splitlines()]
        events = [line["event"] for line in lines if line["logger"] == "src.calculator.validator"]
        assert events == ["Validation failed: negative numbers [-2]"]

    def test_non_verbose_is_silent(self, capfd):
        configure_logging(verbose=False, log_json=True)
        assert StringCalculator().add("1,2") == 3
        assert capfd.readouterr().err == ""

    def test_pipeline_loggers_under_namespace(self):
        """Логгеры модулей (__name__) наследуют уровень от LOGGER_NAMESPACE."""
        configure_logging(verbose=True)
        for name in (
            "src.calculator.resolver",
            "src.calculator.tokenizer",
            "src.calculator.validator",
            "src.calculator.string_calculator",
        ):
            assert name.startswith(LOGGER_NAMESPACE + ".")
            assert logging.getLogger(name).getEffectiveLevel() == logging.DEBUG
