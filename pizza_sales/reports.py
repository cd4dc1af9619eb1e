"""Sales reports over a PizzaDataset.

Every report is a pure function of the dataset and returns a small labeled
DataFrame. Money columns are rounded to cents with SQL rounding.
"""
from __future__ import annotations
import logging
import pandas as pd

from .config import (
    CATEGORY_ORDER, SIZE_ORDER,
    TOP_PER_CATEGORY, TOP_PIZZAS_BY_QUANTITY, TOP_PIZZAS_BY_REVENUE,
)
from .etl import PizzaDataset, order_hours, round_half_up

log = logging.getLogger(__name__)


def _money(s: pd.Series) -> pd.Series:
    return s.map(lambda v: round_half_up(v, 2)).astype(float)


def _order_key(values: pd.Series, order) -> pd.Series:
    # position in a fixed display order; unknown values go last
    return values.map(lambda v: order.index(v) if v in order else len(order))


# ---------- Basics ----------

def total_orders(ds: PizzaDataset) -> pd.DataFrame:
    return pd.DataFrame({"total_orders": [int(ds.orders["order_id"].nunique())]})


def total_revenue(ds: PizzaDataset) -> pd.DataFrame:
    total = ds.sales["line_total"].sum()
    return pd.DataFrame({"total_revenue": [round_half_up(total, 2)]})


def highest_priced_pizza(ds: PizzaDataset) -> pd.DataFrame:
    # max over every pizza; a pizza without a type keeps a null name
    top = ds.pizzas[ds.pizzas["price"] == ds.pizzas["price"].max()]
    top = top.merge(ds.pizza_types, on="pizza_type_id", how="left")
    top = top.sort_values("pizza_id")[["pizza_id", "name", "price"]]
    return top.reset_index(drop=True)


def most_common_size(ds: PizzaDataset) -> pd.DataFrame:
    """Size with the most line items. Ties go to the smaller size."""
    counts = ds.sales.groupby("size").size().rename("order_count").reset_index()
    counts["_k"] = _order_key(counts["size"], SIZE_ORDER)
    counts = counts.sort_values(["order_count", "_k", "size"], ascending=[False, True, True])
    return counts.head(1)[["size", "order_count"]].reset_index(drop=True)


def top_pizzas_by_quantity(ds: PizzaDataset, n: int = TOP_PIZZAS_BY_QUANTITY) -> pd.DataFrame:
    # ranked per pizza (size included), labelled with its type
    q = (ds.sales.groupby(["pizza_id", "pizza_type_id", "name"])["quantity"]
         .sum().rename("total_quantity").reset_index())
    q = q.sort_values(["total_quantity", "pizza_id"], ascending=[False, True]).head(n)
    return q.reset_index(drop=True)


# ---------- Intermediate ----------

def quantity_by_category(ds: PizzaDataset) -> pd.DataFrame:
    q = ds.sales.groupby("category")["quantity"].sum().rename("total_quantity").reset_index()
    q = q.sort_values(["total_quantity", "category"], ascending=[False, True])
    return q.reset_index(drop=True)


def order_distribution_by_day_hour(ds: PizzaDataset) -> pd.DataFrame:
    """Orders per (day of month, hour). Same day number in different months shares a bucket."""
    o = pd.DataFrame({
        "day": pd.to_datetime(ds.orders["date"], errors="coerce").dt.day,
        "hour": order_hours(ds.orders["time"]),
    }).dropna()
    out = o.groupby(["day", "hour"]).size().rename("order_count").reset_index()
    return out.astype(int).sort_values(["day", "hour"]).reset_index(drop=True)


def orders_by_hour(ds: PizzaDataset) -> pd.DataFrame:
    hours = order_hours(ds.orders["time"]).dropna().astype(int)
    out = hours.value_counts().rename_axis("hour").rename("order_count").reset_index()
    return out.sort_values("hour").reset_index(drop=True)


def pizza_count_by_category(ds: PizzaDataset) -> pd.DataFrame:
    menu = ds.pizzas.merge(ds.pizza_types, on="pizza_type_id", how="inner")
    c = menu.groupby("category").size().rename("pizza_count").reset_index()
    c = c.sort_values(["pizza_count", "category"], ascending=[False, True])
    return c.reset_index(drop=True)


def average_pizzas_per_day(ds: PizzaDataset) -> pd.DataFrame:
    daily = ds.sales.groupby("date")["quantity"].sum()
    avg = 0 if daily.empty else int(round_half_up(daily.mean(), 0))
    return pd.DataFrame({"average_pizzas_per_day": [avg]})


def _revenue_by_type(ds: PizzaDataset, by=("pizza_type_id", "name")) -> pd.DataFrame:
    return ds.sales.groupby(list(by))["line_total"].sum().rename("revenue").reset_index()


def top_pizza_types_by_revenue(ds: PizzaDataset, n: int = TOP_PIZZAS_BY_REVENUE) -> pd.DataFrame:
    r = _revenue_by_type(ds)
    r = r.sort_values(["revenue", "pizza_type_id"], ascending=[False, True]).head(n)
    r["revenue"] = _money(r["revenue"])
    return r.reset_index(drop=True)


# ---------- Advanced ----------

def revenue_percentage_by_pizza_type(ds: PizzaDataset) -> pd.DataFrame:
    r = _revenue_by_type(ds)
    total = round_half_up(r["revenue"].sum(), 2) if len(r) else 0.0
    share = r["revenue"] / total * 100 if total else r["revenue"] * 0.0
    r = r.assign(_share=share).sort_values(["_share", "pizza_type_id"], ascending=[False, True])
    r["revenue_percentage"] = r["_share"].map(lambda v: f"{round_half_up(v, 1):.1f}%")
    return r[["pizza_type_id", "name", "revenue_percentage"]].reset_index(drop=True)


def cumulative_revenue_by_month(ds: PizzaDataset) -> pd.DataFrame:
    """Monthly revenue with a running total, January first."""
    m = (ds.sales.dropna(subset=["month"])
         .groupby(["month", "month_name"])["line_total"].sum()
         .sort_index().reset_index())
    out = pd.DataFrame({
        "month": m["month_name"],
        "revenue": _money(m["line_total"]),
    })
    out["cumulative_revenue"] = _money(out["revenue"].cumsum())
    return out


def top_pizza_types_by_revenue_per_category(ds: PizzaDataset, n: int = TOP_PER_CATEGORY,
                                            method: str = "first") -> pd.DataFrame:
    """
    Best pizza types by revenue inside each category.

    ``method`` is passed to ``rank``: "first" numbers rows 1, 2, 3... (ties in
    pizza_type_id order), "dense" lets tied revenues share a rank, so a
    category can return more than ``n`` rows.
    """
    r = _revenue_by_type(ds, by=("category", "pizza_type_id", "name"))
    r = r.sort_values(["category", "revenue", "pizza_type_id"], ascending=[True, False, True])
    r["rank"] = r.groupby("category")["revenue"].rank(method=method, ascending=False).astype(int)
    r = r[r["rank"] <= n].copy()

    r["_k"] = _order_key(r["category"], CATEGORY_ORDER)
    r = r.sort_values(["_k", "category", "rank", "pizza_type_id"])
    r["revenue"] = _money(r["revenue"])
    return r[["category", "rank", "pizza_type_id", "name", "revenue"]].reset_index(drop=True)


REPORTS = {
    "total_orders": total_orders,
    "total_revenue": total_revenue,
    "highest_priced_pizza": highest_priced_pizza,
    "most_common_size": most_common_size,
    "top_pizzas_by_quantity": top_pizzas_by_quantity,
    "quantity_by_category": quantity_by_category,
    "order_distribution_by_day_hour": order_distribution_by_day_hour,
    "orders_by_hour": orders_by_hour,
    "pizza_count_by_category": pizza_count_by_category,
    "average_pizzas_per_day": average_pizzas_per_day,
    "top_pizza_types_by_revenue": top_pizza_types_by_revenue,
    "revenue_percentage_by_pizza_type": revenue_percentage_by_pizza_type,
    "cumulative_revenue_by_month": cumulative_revenue_by_month,
    "top_pizza_types_by_revenue_per_category": top_pizza_types_by_revenue_per_category,
}


def run_all(ds: PizzaDataset) -> dict[str, pd.DataFrame]:
    results = {}
    for name, fn in REPORTS.items():
        results[name] = fn(ds)
        log.debug("%s: %d row(s)", name, len(results[name]))
    return results
