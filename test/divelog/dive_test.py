import pytest

from divelog.dive import MAX_CYLINDERS, Cylinder, Dive, DiveTable, GasMix, Sample


class TestDive:
    def test_cylinder_slots(self):
        dive = Dive(cylinders=[Cylinder(size=12000, description="12l steel")])
        assert len(dive.cylinders) == MAX_CYLINDERS
        assert dive.first_cylinder.description == "12l steel"
        assert len(dive.used_cylinders) == 1

    def test_too_many_cylinders(self):
        with pytest.raises(ValueError):
            Dive(cylinders=[Cylinder() for _ in range(MAX_CYLINDERS + 1)])

    def test_workpressure_only_cylinder_is_used(self):
        assert not Cylinder(workpressure=232000).is_empty
        assert Cylinder().is_empty

    def test_fixup_from_samples(self):
        samples = [
            Sample(0, 0),
            Sample(60, 10000, temperature=290150),
            Sample(120, 10000, temperature=289150),
            Sample(180, 0),
        ]
        dive = Dive(samples=samples).fixup()
        assert dive.duration == 180
        assert dive.maxdepth == 10000
        assert dive.meandepth == 6667
        assert dive.watertemp == 289150

    def test_fixup_keeps_logged_values(self):
        dive = Dive(duration=200, maxdepth=12000, samples=[Sample(0, 0), Sample(180, 0)])
        dive.fixup()
        assert dive.duration == 200
        assert dive.maxdepth == 12000

    def test_gasmix_repr(self):
        assert repr(GasMix()) == "air"
        assert repr(GasMix(o2=320)) == "EAN32"
        assert repr(GasMix(o2=180, he=450)) == "Tx18/45"


class TestDiveTable:
    def test_get(self):
        dive = Dive()
        table = DiveTable([dive])
        assert len(table) == 1
        assert table.get(0) is dive
        assert table.get(1) is None
        assert table.get(-1) is None
        assert table.get(None) is None

    def test_sort_and_renumber(self):
        late, early = Dive(when=2000), Dive(when=1000)
        table = DiveTable([late, early])
        table.sort()
        table.renumber(10)
        assert list(table) == [early, late]
        assert [dive.number for dive in table] == [10, 11]

    def test_remove(self):
        dive = Dive()
        table = DiveTable([dive])
        table.remove(dive)
        assert len(table) == 0
        with pytest.raises(ValueError):
            table.remove(dive)
