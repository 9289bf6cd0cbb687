# raincast/utils/dataframe_helpers.py
from typing import Iterable

import numpy as np
import pandas as pd

from raincast.models.nowcast import ForecastPoint

POINT_COLUMNS = ["timestamp", "value", "precipitation", "has_precipitation"]


def points_to_frame(points: Iterable[ForecastPoint]) -> pd.DataFrame:
    """
    Build a DataFrame from forecast points, sorted by timestamp.

    A missing precipitation rate becomes NaN with has_precipitation False;
    a reported rate keeps has_precipitation True even when it is NaN.

    :param points: Forecast points in any order
    :return: DataFrame with timestamp, value, precipitation, has_precipitation columns
    """
    rows = [
        {
            "timestamp": point.timestamp,
            "value": float(point.value),
            "precipitation": (
                np.nan if point.precipitation is None else float(point.precipitation)
            ),
            "has_precipitation": point.precipitation is not None,
        }
        for point in points
    ]
    if not rows:
        return pd.DataFrame(
            {
                "timestamp": pd.Series(dtype="datetime64[ns]"),
                "value": pd.Series(dtype=float),
                "precipitation": pd.Series(dtype=float),
                "has_precipitation": pd.Series(dtype=bool),
            }
        )

    df = pd.DataFrame(rows, columns=POINT_COLUMNS)
    return df.sort_values("timestamp", kind="mergesort").reset_index(drop=True)
