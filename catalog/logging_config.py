"""
logging_config.py
------------------

This module defines a shared logging configuration and utilities for
structured logging throughout the catalog API.  It uses Python's
built-in ``logging`` module rather than ``print`` so that log output
can be captured by standard logging handlers or external systems.
Messages are serialised as JSON to make them easier to parse
downstream.

To use this module, import ``logger`` and call its methods instead
of ``logging.info`` directly.  The ``log_call`` decorator can be
applied to functions (plain or ``async``) to record entry and exit
points at the DEBUG level.
"""

from __future__ import annotations

import inspect
import json
import logging
import sys
from functools import wraps
from typing import Any, Callable, Dict

# -----------------------------------------------------------------------------
# Configure global logging
# -----------------------------------------------------------------------------

# Set up the root logger once.  Log output goes to stdout with a timestamp,
# log level and the raw message, which itself should be a JSON string.
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)

logger = logging.getLogger("catalog")


def log_event(event: str, level: int = logging.INFO, **fields: Any) -> None:
    """Emit a single JSON log line with an ``event`` name and extra fields.

    Values that cannot be serialised are passed through :func:`_sanitize`
    first, so callers can hand over datetimes, paths or models freely.
    """
    if not logger.isEnabledFor(level):
        return
    logger.log(level, json.dumps({"event": event, **_sanitize(fields)}))


def _sanitize(obj: Any) -> Any:
    """Recursively sanitise objects for logging.

    Dictionaries will have keys containing 'token', 'password' or
    'secret' removed.  Lists and tuples are processed element-wise.
    Pydantic models are logged through their dict representation and
    anything else that is not JSON serialisable falls back to ``str``.

    Parameters
    ----------
    obj : Any
        Arbitrary Python object to sanitise.

    Returns
    -------
    Any
        A sanitised representation of the input suitable for JSON serialisation.
    """
    if isinstance(obj, (bytes, bytearray)):
        return f"<binary {len(obj)} bytes>"
    if isinstance(obj, dict):
        clean: Dict[str, Any] = {}
        for k, v in obj.items():
            if any(keyword in str(k).lower() for keyword in ("token", "password", "secret")):
                continue
            clean[str(k)] = _sanitize(v)
        return clean
    if isinstance(obj, (list, tuple)):
        return [_sanitize(i) for i in obj]
    if hasattr(obj, "model_dump"):
        try:
            return _sanitize(obj.model_dump())
        except Exception:
            return repr(obj)
    try:
        return json.loads(json.dumps(obj))
    except (TypeError, ValueError):
        return str(obj)


def _log_start(name: str, args: Any, kwargs: Any) -> None:
    try:
        logger.debug(json.dumps({
            "event": "call_start",
            "function": name,
            "args": _sanitize(args),
            "kwargs": _sanitize(kwargs),
        }))
    except Exception:
        # If sanitisation fails, still record that the call happened
        logger.debug(json.dumps({"event": "call_start", "function": name}))


def _log_end(name: str, result: Any) -> None:
    try:
        logger.debug(json.dumps({
            "event": "call_end",
            "function": name,
            "result": _sanitize(result),
        }))
    except Exception:
        logger.debug(json.dumps({"event": "call_end", "function": name}))


def log_call(func: Callable[..., Any]) -> Callable[..., Any]:
    """Decorator to log entry and exit of functions.

    This decorator logs a DEBUG level message before a function is executed
    and another after it returns.  The messages include the function name
    and a sanitised snapshot of the arguments and return value.  Coroutine
    functions are wrapped with a coroutine so they can still be awaited
    (and detected as such by FastAPI).

    Examples
    --------

    >>> @log_call
    ... def add(a, b):
    ...     return a + b
    """

    if inspect.iscoroutinefunction(func):
        @wraps(func)
        async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
            if logger.isEnabledFor(logging.DEBUG):
                _log_start(func.__name__, args, kwargs)
            result = await func(*args, **kwargs)
            if logger.isEnabledFor(logging.DEBUG):
                _log_end(func.__name__, result)
            return result

        return async_wrapper

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        if logger.isEnabledFor(logging.DEBUG):
            _log_start(func.__name__, args, kwargs)
        result = func(*args, **kwargs)
        if logger.isEnabledFor(logging.DEBUG):
            _log_end(func.__name__, result)
        return result

    return wrapper
