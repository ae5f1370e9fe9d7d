import inspect
import json
import logging
from functools import wraps
from typing import Any, Callable, Dict, Optional

from opentelemetry import trace

logger = logging.getLogger(__name__)

_tracer_instance: Optional[trace.Tracer] = None


def get_tracer() -> trace.Tracer:
    """Lazily initializes and returns the tracer instance."""
    global _tracer_instance
    if _tracer_instance is None:
        _tracer_instance = trace.get_tracer("httpreq")
    return _tracer_instance


def format_args_for_trace(
    signature: inspect.Signature, *args: Any, **kwargs: Any
) -> Dict[str, Any]:
    """Return a dictionary of inputs from the function signature."""
    try:
        parameter_binding = signature.bind_partial(*args, **kwargs)
        parameter_binding.apply_defaults()
    except TypeError as e:
        logger.warning(f"Error formatting arguments for trace: {e}")
        return {"args": args, "kwargs": kwargs}

    return {
        name: value
        for name, value in parameter_binding.arguments.items()
        if name not in ("self", "cls")
    }


def traced(
    name: Optional[str] = None,
    run_type: Optional[str] = None,
    span_type: Optional[str] = None,
    hide_input: bool = False,
):
    """Decorator that will trace function invocations.

    Spans are created through the OpenTelemetry API; they are dropped unless the
    application configures a tracer provider.

    Args:
        name: Optional span name, defaults to the function name
        run_type: Optional string to categorize the run type
        span_type: Optional string to categorize the span type
        hide_input: If True, don't record the function arguments
    """

    def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
        trace_name = name if name is not None else func.__name__
        signature = inspect.signature(func)

        @wraps(func)
        def sync_wrapper(*args, **kwargs):
            with get_tracer().start_as_current_span(trace_name) as span:
                span.set_attribute(
                    "span_type",
                    span_type if span_type is not None else "function_call_sync",
                )
                if run_type is not None:
                    span.set_attribute("run_type", run_type)

                if not hide_input:
                    inputs = format_args_for_trace(signature, *args, **kwargs)
                    span.set_attribute("inputs", json.dumps(inputs, default=str))
                try:
                    return func(*args, **kwargs)
                except Exception as e:
                    span.record_exception(e)
                    span.set_status(
                        trace.status.Status(trace.status.StatusCode.ERROR, str(e))
                    )
                    raise

        return sync_wrapper

    return decorator
