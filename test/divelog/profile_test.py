import pytest

from divelog.dive import Dive, Sample
from divelog.profile import profile_df, profile_figure
from divelog.units import Length, Units


class TestProfile:
    def test_from_summary(self):
        df = profile_df(Dive(maxdepth=20000, duration=2400))
        assert len(df) == 4
        assert df.depth.max() == 20000
        assert df.time.iloc[-1] == 2400
        assert df.depth.iloc[0] == df.depth.iloc[-1] == 0

    def test_from_samples(self):
        dive = Dive(samples=[Sample(30, 3000), Sample(600, 18000), Sample(1200, 0)])
        df = profile_df(dive)
        assert list(df.time) == [0, 30, 600, 1200]
        assert list(df.depth) == [0, 3000, 18000, 0]

    def test_empty(self):
        assert profile_df(Dive()).empty

    def test_figure(self):
        fig = profile_figure(Dive(maxdepth=20000, duration=2400), Units())
        assert fig.data[0].name == "Depth"
        assert max(fig.data[0].y) == pytest.approx(20.0)
        assert len(fig.data) == 1

    def test_figure_in_feet_with_temperature(self):
        dive = Dive(
            samples=[Sample(0, 0), Sample(600, 30480, temperature=291150), Sample(1200, 0)]
        )
        fig = profile_figure(dive, Units(length=Length.FEET))
        assert max(fig.data[0].y) == pytest.approx(100.0, rel=1e-3)
        assert fig.data[1].name == "Temperature"
        assert list(fig.data[1].y) == pytest.approx([18.0])
