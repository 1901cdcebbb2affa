import pytest

from payroll_desk.logic.employees import (
    EmployeeKind,
    HourlyEmployee,
    SalariedEmployee,
    pay,
)
from payroll_desk.logic.exceptions import InvalidInput, NoSelection
from payroll_desk.services.form_controller import FormController
from payroll_desk.services.session import Session


@pytest.fixture
def session():
    return Session()


@pytest.fixture
def controller(session):
    return FormController(session)


def test_initial_state_is_unselected(controller):
    assert controller.kind is None
    assert controller.hours_enabled is False


def test_type_selection_toggles_hours(controller):
    assert controller.select_type("Part-Time") is True
    assert controller.kind is EmployeeKind.HOURLY
    assert controller.select_type(EmployeeKind.SALARIED) is False
    assert controller.hours_enabled is False
    assert controller.select_type(None) is False
    assert controller.kind is None


def test_add_salaried(controller, session):
    controller.select_type("Full-Time")
    record = controller.submit("Alice", "1", "5000.0", "")
    assert record == SalariedEmployee("Alice", 1, 5000.0)
    assert session.roster.list() == [SalariedEmployee("Alice", 1, 5000.0)]
    assert pay(session.roster.list()[0]) == 5000.0
    assert controller.kind is None


def test_add_hourly(controller, session):
    controller.select_type("Part-Time")
    record = controller.submit("Bob", "2", "20.0", "10")
    assert record == HourlyEmployee("Bob", 2, 10, 20.0)
    assert pay(record) == 200.0
    assert controller.kind is None


def test_salaried_ignores_hours_field(controller, session):
    controller.select_type("Full-Time")
    controller.submit("Alice", "1", "5000", "not a number")
    assert len(session.roster) == 1


def test_add_without_type_is_no_selection(controller, session):
    with pytest.raises(NoSelection) as info:
        controller.submit("Alice", "1", "5000", "")
    assert info.value.target == "type"
    assert str(info.value) == "Please select an employee type."
    assert session.roster.list() == []


def test_no_type_checked_before_parsing(controller, session):
    with pytest.raises(NoSelection):
        controller.submit("", "abc", "xyz", "")
    assert session.roster.list() == []


@pytest.mark.parametrize(
    "kind, fields, bad_field",
    [
        ("Full-Time", ("Alice", "one", "5000", ""), "id"),
        ("Full-Time", ("Alice", "1", "lots", ""), "monthly_salary"),
        ("Full-Time", ("", "1", "5000", ""), "name"),
        ("Part-Time", ("Bob", "2", "20.0", ""), "hours_worked"),
        ("Part-Time", ("Bob", "2", "20.0", "ten"), "hours_worked"),
        ("Part-Time", ("Bob", "2", "", "10"), "hourly_rate"),
    ],
)
def test_invalid_input_leaves_roster_and_state(controller, session, kind, fields, bad_field):
    controller.select_type(kind)
    with pytest.raises(InvalidInput) as info:
        controller.submit(*fields)
    assert info.value.field == bad_field
    assert session.roster.list() == []
    assert controller.kind is EmployeeKind.from_label(kind)


def test_remove_selected_and_nothing_selected(controller, session):
    controller.select_type("Full-Time")
    alice = controller.submit("Alice", "1", "5000.0")
    controller.select_type("Part-Time")
    bob = controller.submit("Bob", "2", "20.0", "10")

    controller.remove(alice)
    assert session.roster.list() == [bob]

    with pytest.raises(NoSelection) as info:
        controller.remove(None)
    assert info.value.target == "row"
    assert str(info.value) == "No employee selected."
    assert session.roster.list() == [bob]


@pytest.mark.parametrize(
    "fields, bad_field",
    [
        (("Bob", "2", "20.0", "9" * 400), "hours_worked"),
        (("Bob", "1" * 5000, "20.0", "10"), "id"),
        (("Bob", "2147483648", "20.0", "10"), "id"),
    ],
)
def test_oversized_integers_are_invalid_input(controller, session, fields, bad_field):
    totals = []
    session.roster.subscribe(lambda r: totals.append(r.total_pay()))
    controller.select_type("Part-Time")

    with pytest.raises(InvalidInput) as info:
        controller.submit(*fields)
    assert info.value.field == bad_field
    assert session.roster.list() == []
    assert totals == []
