"""
Unit tests for errors.py
"""
import io
import pytest
from rental_reports.utils.errors import (
    ExportError,
    NotFoundError,
    ReportError,
    ValidationError,
    error_handler,
)
from rental_reports.utils.input_helper import InputHelper


def test_user_message_defaults_to_message():
    error = ReportError("internal detail")
    assert error.message == "internal detail"
    assert error.user_message == "internal detail"
    assert str(error) == "internal detail"


def test_custom_user_message():
    error = ExportError("disk full on /dev/sda1", user_message="Export failed")
    assert error.user_message == "Export failed"
    assert isinstance(error, ReportError)


@pytest.mark.parametrize("error_class", [ValidationError, NotFoundError, ExportError, ReportError])
def test_error_handler_reports_known_errors(error_class):
    output = io.StringIO()

    @error_handler
    def command(helper):
        raise error_class("boom", user_message="Something went wrong")

    assert command(InputHelper(io.StringIO(), output=output)) is None
    assert output.getvalue() == "❌ Something went wrong\n"


def test_error_handler_uses_output_keyword():
    output = io.StringIO()

    @error_handler
    def command(output=None):
        raise ExportError("disk", user_message="Export failed")

    command(output=output)

    assert output.getvalue() == "❌ Export failed\n"


def test_error_handler_defaults_to_stdout(capsys):
    @error_handler
    def command():
        raise NotFoundError("missing", user_message="Rental not found")

    command()

    assert "❌ Rental not found" in capsys.readouterr().out


def test_error_handler_returns_result():
    @error_handler
    def command(value):
        return value * 2

    assert command(21) == 42


def test_error_handler_reraises_unexpected():
    @error_handler
    def command():
        raise RuntimeError("bug")

    with pytest.raises(RuntimeError, match="bug"):
        command()


def test_error_handler_lets_eof_through():
    @error_handler
    def command():
        raise EOFError

    with pytest.raises(EOFError):
        command()


def test_error_handler_keeps_function_name():
    @error_handler
    def my_command():
        pass

    assert my_command.__name__ == "my_command"
