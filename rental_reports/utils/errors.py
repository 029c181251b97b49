"""
Centralized error handling

Error taxonomy for the rental reporting collaborators and a decorator that
turns known errors into a short console message for CLI commands.
"""
import sys
import logging
from typing import Optional, Callable, TextIO
from functools import wraps

from rental_reports.utils.input_helper import InputHelper

logger = logging.getLogger(__name__)


class ReportError(Exception):
    """Base error for the reporting tool"""
    def __init__(self, message: str, user_message: Optional[str] = None):
        self.message = message
        self.user_message = user_message or message
        super().__init__(self.message)


class ValidationError(ReportError):
    """Invalid data passed to a collaborator"""
    pass


class NotFoundError(ReportError):
    """Requested object does not exist"""
    pass


class ExportError(ReportError):
    """Report could not be written to disk"""
    pass


def _find_output(args, kwargs) -> TextIO:
    """Stream the command writes to: an `output` keyword, else the output of an InputHelper argument"""
    output = kwargs.get('output')
    if output is not None:
        return output
    for arg in args:
        if isinstance(arg, InputHelper):
            return arg.output
    return sys.stdout


def _print_user_message(output: TextIO, text: str) -> None:
    output.write(f"❌ {text}\n")


def error_handler(func: Callable) -> Callable:
    """
    Decorator for CLI commands

    Known reporting errors are logged and shown to the user on the output of
    the command's InputHelper argument (or its `output` keyword), the command
    then returns None. Anything else is logged with a traceback and re-raised.

    Usage:
        @error_handler
        def my_command(manager):
            ...
    """
    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except (ValidationError, NotFoundError, ExportError) as e:
            logger.warning(f"{type(e).__name__} in {func.__name__}: {e.message}")
            _print_user_message(_find_output(args, kwargs), e.user_message)
            return None
        except ReportError as e:
            logger.error(f"Report error in {func.__name__}: {e.message}")
            _print_user_message(_find_output(args, kwargs), e.user_message)
            return None
        except (EOFError, KeyboardInterrupt):
            raise
        except Exception as e:
            logger.exception(f"Unexpected error in {func.__name__}: {e}")
            raise

    return wrapper
