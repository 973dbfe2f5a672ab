# ABOUTME: structlog helpers for the invasion pipeline
# ABOUTME: Timed decorators for page renders and extraction steps, plus a run-scoped logging context

import contextlib
import functools
import time
import uuid
from collections.abc import Callable, Iterator
from typing import Any, TypeVar

import structlog

F = TypeVar("F", bound=Callable[..., Any])


def get_logger(name: str = "rocket_lineups") -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


def _operation_id() -> str:
    return uuid.uuid4().hex[:8]


def _find_url(args: tuple, kwargs: dict) -> str | None:
    url = kwargs.get("url")
    if url:
        return url
    for arg in args:
        if isinstance(arg, str) and arg.startswith(("http://", "https://")):
            return arg
    return None


def _find_adversary(args: tuple) -> str | None:
    """Label of the roster entry a leader step works on, if any."""
    for arg in args[1:]:
        label = getattr(arg, "label", None)
        if isinstance(label, str):
            return label
    return None


async def _timed(bound_logger: structlog.stdlib.BoundLogger, what: str, func, args, kwargs):
    start_time = time.perf_counter()
    try:
        result = await func(*args, **kwargs)
    except Exception as e:
        bound_logger.error(
            f"{what} failed",
            duration_seconds=round(time.perf_counter() - start_time, 3),
            error=str(e),
            error_type=type(e).__name__,
        )
        raise

    extra = {"result_count": len(result)} if isinstance(result, list) else {}
    bound_logger.info(f"{what} succeeded", duration_seconds=round(time.perf_counter() - start_time, 3), **extra)
    return result


def log_api_call(service: str) -> Callable[[F], F]:
    """Time an async call to an external service, binding the URL it targets."""

    def decorator(func: F) -> F:
        @functools.wraps(func)
        async def wrapper(*args, **kwargs):
            bound_logger = get_logger(func.__module__).bind(
                service=service, call_id=_operation_id(), url=_find_url(args, kwargs)
            )
            bound_logger.debug(f"Calling {service}")
            return await _timed(bound_logger, f"Call to {service}", func, args, kwargs)

        return wrapper  # type: ignore[return-value]

    return decorator


def log_extraction_step(step_name: str) -> Callable[[F], F]:
    """Time an async pipeline step; list results are logged with their length."""

    def decorator(func: F) -> F:
        @functools.wraps(func)
        async def wrapper(*args, **kwargs):
            context = {"step": step_name}
            adversary = _find_adversary(args)
            if adversary:
                context["adversary"] = adversary

            bound_logger = get_logger(func.__module__).bind(**context)
            bound_logger.info(f"Starting {step_name}")
            return await _timed(bound_logger, f"Step {step_name}", func, args, kwargs)

        return wrapper  # type: ignore[return-value]

    return decorator


@contextlib.contextmanager
def with_pipeline_context(pipeline_name: str, **context) -> Iterator[structlog.stdlib.BoundLogger]:
    """Bind a run id and context for one pipeline run; failures are logged and re-raised."""
    bound_logger = get_logger("rocket_lineups.pipeline").bind(
        pipeline=pipeline_name, operation_id=_operation_id(), **context
    )
    try:
        yield bound_logger
    except Exception as e:
        bound_logger.error("Pipeline run failed", error=str(e), error_type=type(e).__name__)
        raise
