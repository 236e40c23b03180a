"""Observability helpers for instrumenting engine operations."""

from __future__ import annotations

import inspect
import logging
import time
from functools import wraps
from typing import Any, Callable, Dict, ParamSpec, TypeVar

from pydantic import BaseModel, ValidationError

from closet_app.logging_config import (
    OPERATION_COMPLETED,
    OPERATION_FAILED,
    OPERATION_REJECTED,
    OPERATION_STARTED,
    ensure_correlation_id,
    get_logger,
    log_event,
    redact_for_log,
)

LOGGER = get_logger(__name__)
P = ParamSpec("P")
R = TypeVar("R")


def _argument_summary(arguments: Dict[str, Any]) -> Dict[str, Any]:
    """Describe call arguments by size so wardrobes never land in logs verbatim."""

    summary: Dict[str, Any] = {}
    for key, value in arguments.items():
        if isinstance(value, (list, tuple)):
            summary[f"{key}_size"] = len(value)
        elif isinstance(value, (BaseModel, dict)) or hasattr(value, "__dataclass_fields__"):
            summary[key] = type(value).__name__
        else:
            summary[key] = value
    return redact_for_log(summary)


def _result_summary(result: Any) -> Dict[str, Any]:
    """Count surfaced outfits for list results and response schemas."""

    if isinstance(result, (list, tuple)):
        return {"result_size": len(result)}
    count = getattr(result, "count", None)
    if isinstance(count, int):
        return {"result_size": count}
    return {}


def instrument_operation(
    operation: str,
    input_model: type[BaseModel] | None = None,
    on_validation_error: Callable[[ValidationError], R] | None = None,
) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """Wrap an engine operation with structured logs, timing and optional input validation.

    With ``input_model`` the call is bound to the function signature first, so
    positional and keyword callers are validated the same way, and the function
    then receives the validated values as keywords.
    """

    def decorator(func: Callable[P, R]) -> Callable[P, R]:
        signature = inspect.signature(func)

        @wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            correlation_id = ensure_correlation_id()
            start = time.perf_counter()
            bound = signature.bind(*args, **kwargs)
            arguments = dict(bound.arguments)

            if input_model:
                try:
                    arguments = input_model.model_validate(arguments).model_dump()
                except ValidationError as exc:
                    log_event(
                        LOGGER,
                        logging.WARNING,
                        OPERATION_REJECTED,
                        operation=operation,
                        correlation_id=correlation_id,
                        errors=[error.get("msg") for error in exc.errors()],
                    )
                    if on_validation_error:
                        return on_validation_error(exc)
                    raise
                call_args: tuple = ()
                call_kwargs: Dict[str, Any] = arguments
            else:
                call_args, call_kwargs = bound.args, bound.kwargs

            log_event(
                LOGGER,
                logging.INFO,
                OPERATION_STARTED,
                operation=operation,
                correlation_id=correlation_id,
                arguments=_argument_summary(arguments),
            )
            try:
                result = func(*call_args, **call_kwargs)
            except Exception:
                log_event(
                    LOGGER,
                    logging.ERROR,
                    OPERATION_FAILED,
                    operation=operation,
                    correlation_id=correlation_id,
                    duration_ms=round((time.perf_counter() - start) * 1000, 2),
                    exc_info=True,
                )
                raise
            log_event(
                LOGGER,
                logging.INFO,
                OPERATION_COMPLETED,
                operation=operation,
                correlation_id=correlation_id,
                duration_ms=round((time.perf_counter() - start) * 1000, 2),
                **_result_summary(result),
            )
            return result

        return wrapper

    return decorator


__all__ = ["instrument_operation"]
