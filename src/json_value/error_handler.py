"""Error handling combinators for strict, optional and default-valued access."""

import logging
from typing import Any, Callable, Optional, Tuple

from .types import COERCION_ERRORS


class ErrorHandler:
    """
    Converts the failures of a strict conversion into an empty result.

    Every accessor and coercer is written once, as a strict function that
    raises. The optional and default-valued forms are derived here, so the
    failure policy is chosen by the caller rather than by the converter.
    Only errors of the access/coercion/binding taxonomy are converted;
    anything else propagates.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the error handler.

        Args:
            logger: Optional logger instance for conversion reporting
        """
        self.logger = logger or logging.getLogger(__name__)

    def attempt(self, fn: Callable[..., Any], *args: Any, **kwargs: Any) -> Tuple[bool, Any]:
        """
        Run a strict conversion and report whether it succeeded.

        Args:
            fn: Strict conversion function
            *args: Positional arguments for fn
            **kwargs: Keyword arguments for fn

        Returns:
            Tuple of (succeeded, result); result is None on failure
        """
        try:
            return True, fn(*args, **kwargs)
        except COERCION_ERRORS as e:
            self.logger.debug(f"{getattr(fn, '__name__', fn)} converted to empty: "
                              f"{e.error_type.value} - {e}")
            return False, None

    def optional(self, fn: Callable[..., Any], *args: Any, **kwargs: Any) -> Any:
        """Run a strict conversion, returning None instead of failing."""
        _, result = self.attempt(fn, *args, **kwargs)
        return result

    def or_default(self, fn: Callable[..., Any], default: Any, *args: Any, **kwargs: Any) -> Any:
        """
        Run a strict conversion, substituting a default when it fails.

        Args:
            fn: Strict conversion function
            default: Value returned when the conversion fails
            *args: Positional arguments for fn
            **kwargs: Keyword arguments for fn

        Returns:
            The converted value, or default
        """
        succeeded, result = self.attempt(fn, *args, **kwargs)
        return result if succeeded else default


default_error_handler = ErrorHandler()
