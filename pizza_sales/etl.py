from __future__ import annotations
import logging
from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from functools import cached_property
from pathlib import Path

import pandas as pd

from .config import MONTHS

log = logging.getLogger(__name__)

TABLE_NAMES = ("orders", "pizza_types", "pizzas", "order_details")


def round_half_up(value, digits: int = 0) -> float:
    # SQL ROUND: halves go away from zero (numpy/pandas round to even)
    if pd.isna(value):
        return float("nan")
    q = Decimal(1).scaleb(-digits)
    return float(Decimal(str(value)).quantize(q, rounding=ROUND_HALF_UP))


def _normalize_columns(df: pd.DataFrame) -> pd.DataFrame:
    df = df.copy()
    df.columns = [str(c).strip().lower().replace(" ", "_") for c in df.columns]
    return df


def _text(s: pd.Series) -> pd.Series:
    return s.where(s.isna(), s.astype(str).str.strip())


def _numeric(s: pd.Series, empty_dtype: str = "int64") -> pd.Series:
    # an empty table still needs numeric keys to merge against
    if s.empty:
        return s.astype(empty_dtype)
    return pd.to_numeric(s, errors="coerce")


def clean_orders(df: pd.DataFrame) -> pd.DataFrame:
    df = _normalize_columns(df)
    df["order_id"] = _numeric(df["order_id"])
    df["date"] = pd.to_datetime(df["date"], errors="coerce")
    t = pd.to_datetime(_text(df["time"]), format="%H:%M:%S", errors="coerce")
    df["time"] = t.dt.strftime("%H:%M:%S")
    return df


def clean_pizza_types(df: pd.DataFrame) -> pd.DataFrame:
    df = _normalize_columns(df)
    for c in ["pizza_type_id", "name", "category", "ingredients"]:
        df[c] = _text(df[c])
    return df


def clean_pizzas(df: pd.DataFrame) -> pd.DataFrame:
    df = _normalize_columns(df)
    for c in ["pizza_id", "pizza_type_id", "size"]:
        df[c] = _text(df[c])
    df["price"] = _numeric(df["price"], "float64")
    return df


def clean_order_details(df: pd.DataFrame) -> pd.DataFrame:
    df = _normalize_columns(df)
    df["order_details_id"] = _numeric(df["order_details_id"])
    df["order_id"] = _numeric(df["order_id"])
    df["pizza_id"] = _text(df["pizza_id"])
    df["quantity"] = _numeric(df["quantity"])
    return df


CLEANERS = {
    "orders": clean_orders,
    "pizza_types": clean_pizza_types,
    "pizzas": clean_pizzas,
    "order_details": clean_order_details,
}


@dataclass
class PizzaDataset:
    orders: pd.DataFrame
    pizza_types: pd.DataFrame
    pizzas: pd.DataFrame
    order_details: pd.DataFrame

    @classmethod
    def from_frames(cls, orders, pizza_types, pizzas, order_details) -> "PizzaDataset":
        """Build a dataset from raw frames, normalising each table."""
        return cls(
            orders=clean_orders(pd.DataFrame(orders)),
            pizza_types=clean_pizza_types(pd.DataFrame(pizza_types)),
            pizzas=clean_pizzas(pd.DataFrame(pizzas)),
            order_details=clean_order_details(pd.DataFrame(order_details)),
        )

    def tables(self) -> dict[str, pd.DataFrame]:
        return {name: getattr(self, name) for name in TABLE_NAMES}

    @cached_property
    def sales(self) -> pd.DataFrame:
        return build_sales(self)


def build_sales(ds: PizzaDataset) -> pd.DataFrame:
    """One row per line item with its pizza, pizza type and order attached."""
    sales = (
        ds.order_details
        .merge(ds.pizzas, on="pizza_id", how="inner")
        .merge(ds.pizza_types, on="pizza_type_id", how="inner")
        .merge(ds.orders, on="order_id", how="inner")
    )
    sales["line_total"] = sales["quantity"] * sales["price"]

    sales["date"] = pd.to_datetime(sales["date"], errors="coerce")
    sales["month"] = sales["date"].dt.month
    sales["month_name"] = sales["month"].map(lambda m: MONTHS[int(m) - 1] if pd.notna(m) else None)
    return sales


def order_hours(times: pd.Series) -> pd.Series:
    return pd.to_datetime(times, format="%H:%M:%S", errors="coerce").dt.hour


def load_dataset_csv(directory) -> PizzaDataset:
    directory = Path(directory)
    frames = {}
    for name in TABLE_NAMES:
        path = directory / f"{name}.csv"
        if not path.exists():
            raise FileNotFoundError(f"Missing table {name}: expected {path}")
        frames[name] = pd.read_csv(path)
        log.info("Loaded %s (%d rows) from %s", name, len(frames[name]), path)
    return PizzaDataset.from_frames(**frames)
