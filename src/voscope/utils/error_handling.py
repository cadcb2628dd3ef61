"""Error reporting and timing helpers shared by the navigator layers.

Navigation and filtering never raise on bad data, but hosts still need a
consistent way to surface programming errors (unknown level, bad override
field) and failing callbacks:

    from voscope.utils.error_handling import format_error_message, log_exception

    try:
        controller.navigate_to_level("Sheet", building_id=4, sheet_id=12)
    except (TypeError, ValueError) as e:
        log_exception(e, "Navigation failed")
        show_status(format_error_message(e, "Navigation failed"))

Hot paths (loading, filtering, state commits) are wrapped in ``timed`` or
``TimingContext``; both stay silent unless VOSCOPE_PERF_DEBUG=1.
"""

from __future__ import annotations

import logging
import time
from functools import wraps
from typing import Any, Callable, Optional, TypeVar

from .env import is_perf_debug

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


def _report_timing(operation: str, started: float, failed: bool) -> float:
    elapsed = time.perf_counter() - started
    outcome = "failed after" if failed else "took"
    logger.debug(
        f"PERF: {operation} {outcome} {elapsed:.3f}s",
        extra={"event": "perf", "operation": operation, "elapsed_s": round(elapsed, 6)},
    )
    return elapsed


def timed(func: F) -> F:
    """Log the wall time of ``func`` at DEBUG when perf debugging is on."""

    operation = f"{func.__module__}.{func.__name__}"

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        if not is_perf_debug():
            return func(*args, **kwargs)

        started = time.perf_counter()
        try:
            result = func(*args, **kwargs)
        except Exception:
            _report_timing(operation, started, failed=True)
            raise
        _report_timing(operation, started, failed=False)
        return result

    return wrapper  # type: ignore


class TimingContext:
    """Time a block such as a navigation commit.

    ``elapsed`` holds the measured seconds after exit, or ``None`` when perf
    debugging is off.
    """

    def __init__(self, name: str):
        self.name = name
        self.elapsed: Optional[float] = None
        self._started: Optional[float] = None

    def __enter__(self) -> "TimingContext":
        if is_perf_debug():
            self._started = time.perf_counter()
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        if self._started is None:
            return
        status_name = f"{self.name} failed" if exc_val else f"{self.name} completed"
        elapsed = time.perf_counter() - self._started
        logger.debug(
            f"PERF: {status_name} in {elapsed:.3f}s",
            extra={"event": "perf", "operation": self.name, "elapsed_s": round(elapsed, 6)},
        )
        self.elapsed = elapsed


def format_error_message(
    error: Exception,
    context: Optional[str] = None,
    include_type: bool = True,
) -> str:
    """Build the one-line message shown to users for a failed request.

    Args:
        error: The exception raised by the request
        context: What the user asked for, e.g. "Navigation failed"
        include_type: Prefix the exception class name to the message

    Returns:
        ``"<context> - <Type>: <message>"`` with empty parts dropped
    """
    detail = str(error)
    if not detail or detail == "None":
        detail = type(error).__name__
    elif include_type:
        detail = f"{type(error).__name__}: {detail}"

    return f"{context} - {detail}" if context else detail


def log_exception(
    error: Exception,
    context: str,
    extra: Optional[dict] = None,
    level: int = logging.ERROR,
) -> None:
    """Log ``error`` with its traceback and an ``event="error"`` record field."""

    fields = {"event": "error", "error_type": type(error).__name__}
    if extra:
        fields.update(extra)

    logger.log(level, f"{context}: {error}", extra=fields, exc_info=True)


def safe_operation(
    operation: Callable[[], Any],
    context: str,
    default: Any = None,
    reraise: bool = False,
    level: int = logging.ERROR,
) -> Any:
    """Run ``operation`` and fall back to ``default`` if it raises.

    The failure is logged through :func:`log_exception` at ``level``; the
    dataset loader uses WARNING so one malformed building does not read as
    an application error.

    Example:
        building = safe_operation(
            lambda: parse_building(raw),
            "Parsing VO building entry",
            level=logging.WARNING,
        )
    """
    try:
        return operation()
    except Exception as e:
        log_exception(e, context, level=level)
        if reraise:
            raise
        return default
