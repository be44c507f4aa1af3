"""Contextual logging configuration for MCP Jira."""

import logging
import os
import sys
import time
import types
import uuid
from collections.abc import Mapping
from contextvars import ContextVar, Token
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, cast

# Default logger configuration
DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] [%(name)s] [%(context)s] %(message)s"
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_LOG_DIRECTORY = "logs"
MAX_LOG_SIZE = 10 * 1024 * 1024  # 10 MB
LOG_BACKUP_COUNT = 5


class ContextualLogger(logging.Logger):
    """Logger that maintains context between related operations.

    The context lives in a ``ContextVar``, so overlapping tool calls on the
    event loop each see only their own operation and trace id.
    """

    def __init__(self, name: str, level: int = 0) -> None:
        super().__init__(name, level)
        self._context: ContextVar[dict[str, Any]] = ContextVar(
            f"log_context:{name}", default={}
        )

    def _get_context_str(self) -> str:
        context_data = self._context.get()
        if not context_data:
            return "no-context"

        # operation=X,trace_id=Y,...
        return ",".join(f"{k}={v}" for k, v in context_data.items())

    def _log(
        self,
        level: int,
        msg: object,
        args: tuple[object, ...] | Mapping[str, object],
        exc_info: Any = None,
        extra: Mapping[str, object] | None = None,
        stack_info: bool = False,
        stacklevel: int = 1,
    ) -> None:
        """Overrides _log method to include context."""
        if extra is None:
            extra = {}

        if "context" not in extra:
            extra = dict(extra)
            extra["context"] = self._get_context_str()

        super()._log(level, msg, args, exc_info, extra, stack_info, stacklevel + 1)

    def push_context(self, **kwargs: Any) -> Token[dict[str, Any]]:
        """
        Layers context values over the current ones.

        Args:
            **kwargs: Key-value pairs to add to the context

        Returns:
            Token that restores the previous context via ``pop_context``
        """
        return self._context.set({**self._context.get(), **kwargs})

    def pop_context(self, token: Token[dict[str, Any]]) -> None:
        self._context.reset(token)


class ContextFilter(logging.Filter):
    """Gives records from plain loggers an empty context field."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "context"):
            record.context = "no-context"
        return True


class LoggingContextManager:
    """Logs the start, end and duration of an operation under its own context."""

    def __init__(
        self, logger: ContextualLogger, operation: str, **context: Any
    ) -> None:
        self.logger = logger
        self.operation = operation
        self.context = {
            **context,
            "operation": operation,
            "trace_id": context.get("trace_id", uuid.uuid4().hex[:8]),
        }
        self._token: Token[dict[str, Any]] | None = None
        self._started = 0.0

    def __enter__(self) -> "LoggingContextManager":
        self._token = self.logger.push_context(**self.context)
        self._started = time.monotonic()
        self.logger.info(f"Operation started: {self.operation}")
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: types.TracebackType | None,
    ) -> None:
        elapsed = time.monotonic() - self._started
        try:
            if exc_type:
                self.logger.error(
                    f"Operation failed: {self.operation} after {elapsed:.3f}s - {exc_val}"
                )
            else:
                self.logger.debug(f"Operation completed: {self.operation} in {elapsed:.3f}s")
        finally:
            if self._token is not None:
                self.logger.pop_context(self._token)
                self._token = None


def setup_logger(
    name: str = "mcp-jira",
    level: str | None = None,
    log_to_file: bool = False,
    log_dir: str | None = None,
    log_format: str | None = None,
) -> ContextualLogger:
    """
    Configures and returns a contextual logger.

    Console output goes to stderr; stdout carries the stdio transport.

    Args:
        name: Logger name
        level: Log level (DEBUG, INFO, etc.)
        log_to_file: If True, logs to file
        log_dir: Directory to store log files
        log_format: Log format

    Returns:
        Configured contextual logger
    """
    logging.setLoggerClass(ContextualLogger)

    logger = logging.getLogger(name)

    log_level = level or os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL)
    logger.setLevel(getattr(logging, log_level.upper()))

    formatter = logging.Formatter(log_format or os.getenv("LOG_FORMAT", DEFAULT_FORMAT))

    # Reconfiguring replaces handlers instead of stacking them
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    console_handler.addFilter(ContextFilter())
    logger.addHandler(console_handler)

    if log_to_file:
        log_directory = log_dir or os.getenv("LOG_DIR", DEFAULT_LOG_DIRECTORY)
        Path(log_directory).mkdir(parents=True, exist_ok=True)

        log_file = Path(log_directory) / f"{name}.log"
        file_handler = RotatingFileHandler(
            log_file, maxBytes=MAX_LOG_SIZE, backupCount=LOG_BACKUP_COUNT
        )
        file_handler.setFormatter(formatter)
        file_handler.addFilter(ContextFilter())
        logger.addHandler(file_handler)

    # Prevents propagation to the root logger
    logger.propagate = False

    return cast(ContextualLogger, logger)


def log_operation(
    logger: ContextualLogger, operation: str, **context: Any
) -> LoggingContextManager:
    """
    Creates a context manager for operation logging.

    Args:
        logger: Contextual logger
        operation: Name of the operation
        **context: Additional context data

    Returns:
        Context manager configured for operation logging
    """
    return LoggingContextManager(logger, operation, **context)
