import logging

import numpy as np
import pandas as pd
from plotly.subplots import make_subplots

from divelog.dive import Dive
from divelog.formatting import format_date
from divelog.units import (
    Length,
    Units,
    depth_unit_title,
    mkelvin_to,
    mm_to_feet,
    temperature_unit_title,
)

logger = logging.getLogger(__name__)

DESCENT_RATE = 18000  # mm/min
ASCENT_RATE = 10000  # mm/min


def profile_df(dive: Dive):
    """Time/depth points of the dive, estimated from its summary when it has no samples."""
    if dive.samples:
        df = pd.DataFrame(
            {
                "time": [sample.time for sample in dive.samples],
                "depth": [sample.depth for sample in dive.samples],
                "temperature": [sample.temperature for sample in dive.samples],
            }
        )
        if df.time.iloc[0] != 0:
            df = pd.concat(
                [pd.DataFrame({"time": [0], "depth": [0], "temperature": [0]}), df],
                ignore_index=True,
            )
        return df

    if not dive.duration or not dive.maxdepth:
        return pd.DataFrame({"time": [], "depth": [], "temperature": []})

    descent = min(dive.maxdepth / DESCENT_RATE * 60, dive.duration / 3)
    ascent = min(dive.maxdepth / ASCENT_RATE * 60, dive.duration / 3)
    times = np.array([0, descent, dive.duration - ascent, dive.duration])
    depths = np.array([0, dive.maxdepth, dive.maxdepth, 0])
    return pd.DataFrame(
        {"time": times, "depth": depths, "temperature": np.zeros(len(times))}
    )


def profile_figure(dive: Dive, units: Units, width=None, height=None):
    df = profile_df(dive)

    if units.length == Length.FEET:
        depth = mm_to_feet(df.depth)
    else:
        depth = df.depth / 1000
    minutes = df.time / 60

    fig = make_subplots(specs=[[{"secondary_y": True}]])
    fig.update_layout(
        hovermode="x unified",
        title=format_date(dive.when),
        width=width,
        height=height,
        margin={"l": 40, "r": 40, "t": 40, "b": 40},
    )
    fig.update_yaxes(
        autorange="reversed", title_text=depth_unit_title(units.length), secondary_y=False
    )
    fig.update_xaxes(title_text="min")
    fig.add_scatter(x=minutes, y=depth, name="Depth", fill="tozeroy", secondary_y=False)

    temperatures = df[df.temperature > 0]
    if not temperatures.empty:
        fig.add_scatter(
            x=temperatures.time / 60,
            y=[mkelvin_to(t, units.temperature) for t in temperatures.temperature],
            name="Temperature",
            secondary_y=True,
        )
        fig.update_yaxes(
            title_text=temperature_unit_title(units.temperature), secondary_y=True
        )
    logger.debug(f"profile figure for {dive!r} with {len(df)} points")
    return fig
