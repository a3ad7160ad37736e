"""
Тесты для демонстрационной программы

Проверяет:
1. Все секции печатаются и содержат эталонные значения
2. Код возврата 0 при успехе и 1 при BigIntError на границе
3. JSON/text форматирование логов
"""

import io
import json
import logging

import pytest

from src.demo.logging_setup import JSONFormatter, KeyValueFormatter, setup_logging, timed_section
from src.demo.runner import build_parser, main, run


@pytest.fixture
def restore_root_logging():
    """Сохраняет и восстанавливает обработчики root-логгера."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


class TestRun:
    """run(): вывод секций"""

    def test_sections_and_reference_values(self):
        out = io.StringIO()
        assert run(out, seed=42, factorial_n=20) == 0

        text = out.getvalue()
        for section in (
            "BASIC ARITHMETIC OPERATIONS",
            "MATHEMATICAL FUNCTIONS",
            "ADVANCED FEATURES",
            "PERFORMANCE DEMONSTRATION",
        ):
            assert section in text

        assert "a + b = 1111111110" in text
        assert "a - b = -864197532" in text
        assert "a * b = 121932631112635269" in text
        assert "b / a = 8" in text
        assert "b % a = 9" in text
        assert "Factorial of 15 = 1307674368000" in text
        assert "Fibonacci(30) = 832040" in text
        assert "Catalan(8) = 1430" in text
        assert "GCD(48, 18) = 6" in text
        assert "LCM(48, 18) = 144" in text
        assert "Square root of 100 = 10" in text
        assert "17 is prime" in text
        assert "100 is not prime" in text
        assert "Factorization of 360 = 2^3 * 3^2 * 5^1" in text
        assert "Result has 19 digits" in text
        assert "All operations completed successfully!" in text

    def test_error_at_boundary_returns_one(self, caplog):
        out = io.StringIO()
        with caplog.at_level(logging.ERROR):
            assert run(out, factorial_n=-1) == 1
        assert "demo failed" in caplog.text
        assert "All operations completed successfully!" not in out.getvalue()


class TestMain:
    """main(): разбор аргументов"""

    def test_parser_defaults(self):
        args = build_parser().parse_args([])
        assert args.log_level == "WARNING"
        assert args.log_format == "text"
        assert args.seed is None
        assert args.factorial_n == 50

    def test_main_success(self, capsys, restore_root_logging):
        assert main(["--seed", "1", "--factorial-n", "10", "--log-level", "ERROR"]) == 0
        assert "Result has 7 digits" in capsys.readouterr().out


class TestLogging:
    """Форматирование логов и замер секций"""

    def test_json_formatter_includes_demo_fields(self):
        record = logging.LogRecord("demo", logging.INFO, __file__, 1, "done", None, None)
        record.section = "performance"
        record.elapsed_ms = 1.5
        payload = json.loads(JSONFormatter().format(record))

        assert payload["message"] == "done"
        assert payload["level"] == "INFO"
        assert payload["section"] == "performance"
        assert payload["elapsed_ms"] == 1.5
        assert "digit_count" not in payload

    def test_text_formatter_appends_key_value_pairs(self):
        record = logging.LogRecord("demo", logging.INFO, __file__, 1, "done", None, None)
        record.section = "basic"
        record.digit_count = 19

        line = KeyValueFormatter().format(record)

        assert line.endswith("INFO demo - done section=basic digit_count=19")

    def test_setup_logging_installs_handler(self, restore_root_logging):
        handler = setup_logging(level="debug", fmt="json")
        assert handler in logging.getLogger().handlers
        assert isinstance(handler.formatter, JSONFormatter)
        assert logging.getLogger().level == logging.DEBUG

    def test_setup_logging_replaces_previous_handler(self, restore_root_logging):
        first = setup_logging(fmt="json")
        second = setup_logging(fmt="text")

        handlers = logging.getLogger().handlers
        assert first not in handlers
        assert second in handlers
        assert isinstance(second.formatter, KeyValueFormatter)

    @pytest.mark.parametrize("kwargs", [{"level": "LOUD"}, {"fmt": "xml"}])
    def test_setup_logging_rejects_unknown_options(self, kwargs, restore_root_logging):
        with pytest.raises(ValueError, match="Unknown log"):
            setup_logging(**kwargs)

    def test_timed_section_logs_elapsed_and_extra(self, caplog):
        logger = logging.getLogger("test.timed")
        with caplog.at_level(logging.INFO, logger="test.timed"):
            with timed_section(logger, "factorial") as timing:
                timing.extra["digit_count"] = 3

        assert timing.elapsed_ms >= 0.0
        [record] = caplog.records
        assert record.section == "factorial"
        assert record.digit_count == 3
        assert record.elapsed_ms == timing.elapsed_ms

    def test_timed_section_does_not_log_failures(self, caplog):
        logger = logging.getLogger("test.timed")
        with caplog.at_level(logging.INFO, logger="test.timed"):
            with pytest.raises(RuntimeError):
                with timed_section(logger, "broken"):
                    raise RuntimeError("boom")
        assert caplog.records == []

    def test_json_stream_output(self, restore_root_logging):
        stream = io.StringIO()
        setup_logging(level="INFO", fmt="json", stream=stream)
        assert run(io.StringIO(), seed=3, factorial_n=5) == 0

        sections = [json.loads(line).get("section") for line in stream.getvalue().splitlines()]
        assert {"basic", "math", "advanced", "factorial", "performance"} <= set(sections)
