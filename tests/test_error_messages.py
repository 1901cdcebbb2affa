import logging

from payroll_desk.logic.exceptions import InvalidInput, NoSelection
from payroll_desk.services.error_messages import (
    SEVERITY_ERROR,
    SEVERITY_WARNING,
    translate_error,
)


def test_invalid_input_is_error_with_field_label():
    title, message, severity = translate_error(InvalidInput("hours_worked"))
    assert severity == SEVERITY_ERROR
    assert title == "Invalid input"
    assert message.startswith("Invalid input. Please check your entries.")
    assert "Hours Worked" in message


def test_invalid_input_without_field():
    _, message, _ = translate_error(InvalidInput())
    assert message == "Invalid input. Please check your entries."


def test_no_selection_is_warning():
    assert translate_error(NoSelection("type")) == (
        "No selection",
        "Please select an employee type.",
        SEVERITY_WARNING,
    )
    assert translate_error(NoSelection("row"))[1] == "No employee selected."


def test_unexpected_error_is_logged(caplog):
    with caplog.at_level(logging.ERROR):
        title, message, severity = translate_error(RuntimeError("boom"))
    assert title == "Error"
    assert "boom" in message
    assert severity == SEVERITY_ERROR
    assert "Erreur inattendue" in caplog.text
