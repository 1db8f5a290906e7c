"""Call logging for the dashboard data and service layers.

Repository calls are logged as ``CALL``/``OK``/``FAIL`` with the number of
records returned; service calls as ``SERVICE CALL``/``SERVICE OK``/``SERVICE
FAIL`` with elapsed time. Everything goes to ``logs/api_calls.log``.
"""

from __future__ import annotations

import functools
import logging
import threading
import time
from pathlib import Path
from typing import Any, Callable, TypeVar

F = TypeVar("F", bound=Callable[..., Any])

_LOG_DIR = str(Path(__file__).resolve().parent.parent / "logs")
_LOG_FILE = str(Path(_LOG_DIR) / "api_calls.log")
_LOGGER_NAME = "gpstelemetry_dashboard.api"

_logger: logging.Logger | None = None
_logger_lock = threading.Lock()


def _build_logger() -> logging.Logger:
    Path(_LOG_DIR).mkdir(parents=True, exist_ok=True)
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    if not logger.handlers:
        handler = logging.FileHandler(_LOG_FILE, encoding="utf-8")
        handler.setFormatter(logging.Formatter("%(asctime)s | %(levelname)s | %(message)s"))
        logger.addHandler(handler)
    return logger


def _get_logger() -> logging.Logger:
    """Return the call logger, creating the log file on first use."""
    global _logger
    if _logger is None:
        with _logger_lock:
            if _logger is None:
                _logger = _build_logger()
    return _logger


def _describe_args(args: tuple[Any, ...], kwargs: dict[str, Any]) -> str:
    # args[0] is self
    parts = [repr(a) for a in args[1:]]
    parts.extend(f"{k}={v!r}" for k, v in kwargs.items())
    return ", ".join(parts)


def _record_count(result: Any) -> int:
    """Records carried by a repository result: a list, a page, or one record."""
    if result is None:
        return 0
    if isinstance(result, (list, tuple)):
        return len(result)
    data = getattr(result, "data", None)
    if isinstance(data, list):
        return len(data)
    return 1


def _logged(
    fn: Callable[..., Any],
    on_call: Callable[[str, str], str],
    on_ok: Callable[[str, str, Any, float], str],
    on_fail: Callable[[str, str, Exception, float], str],
) -> Callable[..., Any]:
    """Wrap *fn* so each call logs a start line and an outcome line."""
    name = fn.__qualname__

    @functools.wraps(fn)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        logger = _get_logger()
        described = _describe_args(args, kwargs)
        logger.info(on_call(name, described))
        start = time.monotonic()
        try:
            result = fn(*args, **kwargs)
        except Exception as exc:
            logger.error(on_fail(name, described, exc, time.monotonic() - start))
            raise
        logger.info(on_ok(name, described, result, time.monotonic() - start))
        return result

    return wrapper


def log_api_call(fn: F) -> F:
    """Decorator for repository methods: logs arguments and records returned."""
    return _logged(  # type: ignore[return-value]
        fn,
        on_call=lambda name, args: f"CALL: {name}({args})",
        on_ok=lambda name, args, result, secs: (
            f"OK: {name}({args}) -> {_record_count(result)} items ({secs:.3f}s)"
        ),
        on_fail=lambda name, args, exc, secs: (
            f"FAIL: {name}({args}) -> {type(exc).__name__}: {exc} ({secs:.3f}s)"
        ),
    )


def log_service_call(fn: F) -> F:
    """Decorator for service methods: logs arguments and elapsed time."""
    return _logged(  # type: ignore[return-value]
        fn,
        on_call=lambda name, args: f"SERVICE CALL: {name}({args})",
        on_ok=lambda name, args, result, secs: f"SERVICE OK: {name} -> {secs:.3f}s",
        on_fail=lambda name, args, exc, secs: (
            f"SERVICE FAIL: {name} -> {type(exc).__name__}: {exc} ({secs:.3f}s)"
        ),
    )
