"""Tests for the contextual logging configuration."""

import logging
import sys
from logging.handlers import RotatingFileHandler

import anyio
import pytest

from mcp_jira.logging_config import ContextualLogger, log_operation, setup_logger


@pytest.fixture
def logger_name(request):
    """A logger name unique to the running test."""
    name = f"mcp-jira.test.{request.node.name}"
    yield name
    logger = logging.getLogger(name)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


def test_setup_logger_returns_contextual_logger(logger_name):
    logger = setup_logger(logger_name, level="DEBUG")

    assert isinstance(logger, ContextualLogger)
    assert logger.level == logging.DEBUG
    assert logger.propagate is False


def test_console_output_goes_to_stderr(logger_name):
    """stdout is reserved for the stdio transport."""
    logger = setup_logger(logger_name)

    streams = [
        handler.stream
        for handler in logger.handlers
        if isinstance(handler, logging.StreamHandler)
        and not isinstance(handler, RotatingFileHandler)
    ]
    assert streams == [sys.stderr]


def test_setup_logger_does_not_stack_handlers(logger_name):
    setup_logger(logger_name)
    logger = setup_logger(logger_name)

    assert len(logger.handlers) == 1


def test_setup_logger_file_handler(logger_name, tmp_path):
    logger = setup_logger(logger_name, log_to_file=True, log_dir=str(tmp_path))

    file_handlers = [h for h in logger.handlers if isinstance(h, RotatingFileHandler)]
    assert len(file_handlers) == 1
    assert (tmp_path / f"{logger_name}.log").exists()


def test_log_operation_sets_and_restores_context(logger_name, tmp_path):
    logger = setup_logger(logger_name, level="DEBUG", log_to_file=True, log_dir=str(tmp_path))

    with log_operation(logger, "tool:execute_jql", trace_id="abc12345"):
        assert logger._get_context_str() == (
            "trace_id=abc12345,operation=tool:execute_jql"
        )
        logger.info("inside")

    assert logger._get_context_str() == "no-context"

    for handler in logger.handlers:
        handler.flush()
    content = (tmp_path / f"{logger_name}.log").read_text()
    assert "Operation started: tool:execute_jql" in content
    assert "[trace_id=abc12345,operation=tool:execute_jql] inside" in content
    assert "Operation completed: tool:execute_jql" in content


def test_log_operation_logs_failures(logger_name, tmp_path):
    logger = setup_logger(logger_name, log_to_file=True, log_dir=str(tmp_path))

    with pytest.raises(ValueError):
        with log_operation(logger, "tool:delete_ticket"):
            raise ValueError("boom")

    for handler in logger.handlers:
        handler.flush()
    content = (tmp_path / f"{logger_name}.log").read_text()
    assert "Operation failed: tool:delete_ticket" in content
    assert "boom" in content
    assert logger._get_context_str() == "no-context"


def test_plain_logger_records_get_default_context(logger_name, tmp_path):
    logger = setup_logger(logger_name, log_to_file=True, log_dir=str(tmp_path))
    record = logging.LogRecord(logger_name, logging.INFO, __file__, 1, "plain", None, None)

    logger.handle(record)

    for handler in logger.handlers:
        handler.flush()
    assert "[no-context] plain" in (tmp_path / f"{logger_name}.log").read_text()


def test_nested_operations_restore_outer_context(logger_name):
    logger = setup_logger(logger_name)

    with log_operation(logger, "outer", trace_id="aaaa1111"):
        with log_operation(logger, "inner", trace_id="bbbb2222"):
            assert logger._get_context_str() == "trace_id=bbbb2222,operation=inner"
        assert logger._get_context_str() == "trace_id=aaaa1111,operation=outer"

    assert logger._get_context_str() == "no-context"


@pytest.mark.anyio
async def test_concurrent_operations_do_not_share_context(logger_name):
    logger = setup_logger(logger_name)
    seen = {}
    both_entered = anyio.Event()
    entered = []

    async def operation(name):
        with log_operation(logger, name, trace_id=name):
            entered.append(name)
            if len(entered) == 2:
                both_entered.set()
            await both_entered.wait()
            seen[name] = logger._get_context_str()

    async with anyio.create_task_group() as tg:
        tg.start_soon(operation, "first")
        tg.start_soon(operation, "second")

    assert seen == {
        "first": "trace_id=first,operation=first",
        "second": "trace_id=second,operation=second",
    }
    assert logger._get_context_str() == "no-context"
