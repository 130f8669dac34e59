"""Error handling middleware for the application."""

import functools
import json
import sys
from typing import Any, Callable, Optional

from patterncraft.infrastructure.error.exception_handler import (
    ExceptionHandler,
    get_exception_handler,
)


class ErrorMiddleware:
    """Middleware for consistent error handling."""

    def __init__(self, error_handler: Optional[ExceptionHandler] = None):
        self._error_handler = error_handler or get_exception_handler()

    def wrap_handler(self, handler_func: Callable) -> Callable:
        """
        Wrap a handler function with error handling.

        Args:
            handler_func: The handler function to wrap

        Returns:
            Wrapped handler returning an error dictionary instead of raising
        """

        @functools.wraps(handler_func)
        def wrapped_handler(*args: Any, **kwargs: Any):
            try:
                return handler_func(*args, **kwargs)
            except Exception as e:
                return self._error_handler.handle(e).to_dict()

        return wrapped_handler

    def wrap_script_handler(self, script_handler: Callable[..., int]) -> Callable[..., int]:
        """
        Wrap a script entry point with error handling.

        On failure the error is printed to stdout as JSON and the wrapped
        callable returns exit status 1.
        """

        @functools.wraps(script_handler)
        def wrapped_script_handler(*args: Any, **kwargs: Any) -> int:
            try:
                return script_handler(*args, **kwargs)
            except Exception as e:
                error_response = self._error_handler.handle(e)
                print(json.dumps(error_response.to_dict(), indent=2, default=str), file=sys.stdout)
                return 1

        return wrapped_script_handler


def with_error_handling(error_handler: Optional[ExceptionHandler] = None):
    """
    Decorator for adding error handling to functions.

    Args:
        error_handler: Optional error handler instance

    Returns:
        Decorator function
    """
    middleware = ErrorMiddleware(error_handler)

    def decorator(func: Callable) -> Callable:
        return middleware.wrap_handler(func)

    return decorator
