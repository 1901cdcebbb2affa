import pytest

QtCore = pytest.importorskip("PyQt6.QtCore")

from payroll_desk.logic.employees import make_hourly, make_salaried  # noqa: E402
from payroll_desk.services.roster import Roster  # noqa: E402
from payroll_desk.ui.roster_model import HEADERS, RosterTableModel  # noqa: E402

Qt = QtCore.Qt


@pytest.fixture
def roster():
    return Roster()


@pytest.fixture
def model(qapp, roster):
    m = RosterTableModel(roster)
    yield m
    m.detach()


def test_headers(model):
    assert model.columnCount() == 3
    for col, title in enumerate(HEADERS):
        assert model.headerData(col, Qt.Orientation.Horizontal) == title
    assert model.headerData(0, Qt.Orientation.Vertical) == "1"


def test_model_follows_roster(model, roster):
    alice = make_salaried("Alice", 1, 5000.0)
    bob = make_hourly("Bob", 2, 10, 20.0)

    assert model.rowCount() == 0
    roster.add(alice)
    roster.add(bob)
    assert model.rowCount() == 2

    assert model.data(model.index(0, 0)) == "Alice"
    assert model.data(model.index(0, 1)) == "1"
    assert model.data(model.index(0, 2)) == "5 000.00 $"
    assert model.data(model.index(1, 2), Qt.ItemDataRole.UserRole) == 200.0
    assert model.data(model.index(1, 1), Qt.ItemDataRole.UserRole) == 2

    assert model.record_at(0) is alice
    assert model.row_of(bob) == 1
    assert model.record_at(5) is None

    roster.remove(alice)
    assert model.rowCount() == 1
    assert model.record_at(0) is bob
    assert model.row_of(alice) == -1


def test_reset_signals_on_mutation(model, roster):
    resets = []
    model.modelReset.connect(lambda: resets.append(model.rowCount()))
    roster.add(make_salaried("Alice", 1, 5000.0))
    assert resets == [1]


def test_dataframe_snapshot(model, roster):
    roster.add(make_salaried("Alice", 1, 5000.0))
    df = model.dataframe()
    assert list(df.columns) == ["name", "id", "pay"]
    assert df["pay"].tolist() == [5000.0]
