from __future__ import annotations
import logging
import pandas as pd
from pathlib import Path
from . import config
from .etl import CLEANERS, TABLE_NAMES, PizzaDataset
from .schema import columns

log = logging.getLogger(__name__)


def tpath(name: str) -> Path:
    return Path(config.TABLE_DIR) / f"{name}.csv"

def read_table(name: str) -> pd.DataFrame:
    p = tpath(name)
    return pd.read_csv(p) if p.exists() else pd.DataFrame()

def write_table(name: str, df: pd.DataFrame) -> None:
    p = tpath(name)
    p.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(p, index=False)

def save_dataset(ds: PizzaDataset) -> None:
    for name, df in ds.tables().items():
        write_table(name, df)
        log.info("Saved %s (%d rows) to %s", name, len(df), tpath(name))

def load_dataset() -> PizzaDataset:
    """Read the stored tables back; a missing table loads as empty with its declared columns."""
    frames = {}
    for name in TABLE_NAMES:
        df = read_table(name)
        if df.empty and not len(df.columns):
            df = pd.DataFrame(columns=columns(name))
        frames[name] = CLEANERS[name](df)
    return PizzaDataset(**frames)
