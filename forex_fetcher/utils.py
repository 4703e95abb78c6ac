import pandas as pd
from typing import Iterable, Sequence

from forex_fetcher.api.exchangerate import RateSample


def index_frame(values: Iterable[float]) -> pd.DataFrame:
    """Plot-ready frame: sample index on `sample`, value on `rate`."""
    rates = [float(v) for v in values]
    return pd.DataFrame({"sample": range(len(rates)), "rate": rates})

def samples_to_frame(samples: Sequence[RateSample]) -> pd.DataFrame:
    df = pd.DataFrame(
        [{"time": s.date, "rate": s.rate} for s in samples],
        columns=["time", "rate"],
    )
    df["time"] = pd.to_datetime(df["time"])
    df = df.sort_values("time").reset_index(drop=True)
    df.insert(0, "sample", range(len(df)))
    return df
