import calendar

import pytest

from divelog.context import AppContext
from divelog.dive import Cylinder, Dive, DiveTable, GasMix
from divelog.divelist import DiveListPresenter
from divelog.units import Length, Temperature, Units, Volume

from fakes import FakeDiveListView


def make_dives():
    return [
        Dive(
            when=calendar.timegm((2011, 9, 3, 9, 5, 0)),
            maxdepth=19000,
            meandepth=10000,
            duration=1200,
            watertemp=291150,
            location="2nd Cathedral, Lanai",
            cylinders=[
                Cylinder(
                    size=2000,
                    start=200000,
                    end=50000,
                    description="12l steel",
                    gasmix=GasMix(o2=320),
                )
            ],
        ),
        Dive(
            when=calendar.timegm((2011, 9, 4, 10, 0, 0)),
            maxdepth=20500,
            duration=2730,
        ),
    ]


@pytest.fixture
def context():
    return AppContext(dives=DiveTable(make_dives()))


@pytest.fixture
def view():
    return FakeDiveListView()


@pytest.fixture
def repaints():
    return []


@pytest.fixture
def presenter(context, view, repaints):
    return DiveListPresenter(context, view, repaint=lambda: repaints.append(1))


class TestRebuild:
    def test_one_row_per_dive(self, presenter, view):
        presenter.rebuild()
        assert [row.index for row in view.rows] == [0, 1]

    def test_row_strings(self, presenter, view):
        presenter.rebuild()
        row = view.rows[0]
        assert row.date == "Sat, Sep 3, 2011 09:05"
        assert row.depth == "19.0"
        assert row.duration == "20:00"
        assert row.temperature == "18.0"
        assert row.nitrox == "32.0"
        assert row.sac == " 7.4"
        assert row.location == "2nd Cathedral, Lanai"
        assert row.cylinder == "12l steel"

        row = view.rows[1]
        assert row.depth == "20"
        assert row.duration == "45:30"
        assert row.temperature == ""
        assert row.nitrox == "air"
        assert row.sac == ""
        assert row.location == ""

    def test_selects_first_row(self, presenter, context, view, repaints):
        presenter.rebuild()
        assert view.selected == 0
        assert context.selected_index == 0
        assert repaints

    def test_empty(self, view, repaints):
        context = AppContext()
        context.selected_index = 3
        presenter = DiveListPresenter(context, view, repaint=lambda: repaints.append(1))
        presenter.rebuild()
        assert view.rows == []
        assert view.selected is None
        assert context.selected_index == -1
        assert context.current_dive is None

    def test_rebuild_follows_table(self, presenter, context, view):
        presenter.rebuild()
        context.dives.append(Dive(maxdepth=5000))
        presenter.rebuild()
        assert len(view.rows) == 3
        assert view.rows[2].depth == "5.0"


class TestUnits:
    def test_titles(self, presenter, context, view):
        presenter.rebuild()
        assert view.titles == ("m", "°C")
        context.units = Units(
            length=Length.FEET, volume=Volume.CUFT, temperature=Temperature.FAHRENHEIT
        )
        presenter.refresh_units()
        assert view.titles == ("ft", "°F")

    def test_rows_follow_units(self, presenter, context, view):
        presenter.rebuild()
        context.units = Units(
            length=Length.FEET, volume=Volume.CUFT, temperature=Temperature.FAHRENHEIT
        )
        presenter.refresh_units()
        assert view.rows[0].depth == "62"
        assert view.rows[0].temperature == "64.4"
        assert view.rows[0].sac == "0.26"
        assert len(view.rows) == 2

    def test_refresh_units_is_idempotent(self, presenter, context, view):
        presenter.rebuild()
        context.units = Units(length=Length.FEET)
        presenter.refresh_units()
        first = [vars(row).copy() for row in view.rows]
        presenter.refresh_units()
        assert [vars(row) for row in view.rows] == first

    def test_keeps_selection(self, presenter, context):
        presenter.rebuild()
        presenter.select(1)
        presenter.refresh_units()
        assert context.selected_index == 1


class TestRefresh:
    def test_refresh_one(self, presenter, context, view):
        presenter.rebuild()
        dive = context.dives[1]
        dive.location = "Molokini"
        updates = view.updates
        assert presenter.refresh_one(dive)
        assert view.updates == updates + 1
        assert view.rows[1].location == "Molokini"
        assert view.rows[0].location == "2nd Cathedral, Lanai"

    def test_refresh_unknown_dive(self, presenter):
        presenter.rebuild()
        assert not presenter.refresh_one(Dive())

    def test_refresh_all(self, presenter, context, view):
        presenter.rebuild()
        for dive in context.dives:
            dive.location = "x" * 60
        presenter.refresh_all()
        assert [row.location for row in view.rows] == ["x" * 40, "x" * 40]


class TestSelection:
    def test_select(self, presenter, context, repaints):
        presenter.rebuild()
        count = len(repaints)
        presenter.on_selection_changed(1)
        assert context.selected_index == 1
        assert context.current_dive is context.dives[1]
        assert len(repaints) == count + 1

    def test_out_of_range(self, presenter, context, repaints):
        presenter.rebuild()
        count = len(repaints)
        presenter.select(5)
        assert context.selected_index == 0
        assert len(repaints) == count


class TestChanges:
    def test_unsaved_changes(self, presenter):
        assert not presenter.unsaved_changes()
        presenter.mark_changed(True)
        assert presenter.unsaved_changes()
        presenter.mark_changed(False)
        assert not presenter.unsaved_changes()

    def test_font(self, presenter, context, view):
        presenter.set_font("Monospace 10")
        assert context.divelist_font == "Monospace 10"
        assert view.font == "Monospace 10"
