from __future__ import annotations
import pandas as pd
import matplotlib.pyplot as plt
from . import config
from .etl import PizzaDataset
from .reports import run_all
from .report_text import render_report
from .storage import load_dataset


def build_figures(results: dict[str, pd.DataFrame]) -> dict[str, plt.Figure]:
    figs = {}

    h = results["orders_by_hour"].set_index("hour")["order_count"].reindex(range(24), fill_value=0)
    fig, ax = plt.subplots(figsize=(4.5, 3.2))
    ax.bar(h.index, h.values)
    ax.set_xticks(range(0, 24, 2))
    ax.set_xlabel("Hour"); ax.set_ylabel("# Orders")
    ax.set_title("Orders by hour")
    fig.tight_layout()
    figs["kpi_orders_by_hour"] = fig

    top = results["top_pizzas_by_quantity"]
    fig, ax = plt.subplots(figsize=(4.5, 3.2))
    ax.barh(top["pizza_id"][::-1], top["total_quantity"][::-1])
    ax.set_xlabel("Quantity")
    ax.set_title("Top pizzas by quantity")
    fig.tight_layout()
    figs["kpi_top_quantity"] = fig

    cat = results["quantity_by_category"]
    fig, ax = plt.subplots(figsize=(4.5, 3.2))
    ax.bar(cat["category"], cat["total_quantity"])
    ax.set_ylabel("Quantity")
    ax.set_title("Quantity by category")
    fig.tight_layout()
    figs["kpi_quantity_by_category"] = fig

    cum = results["cumulative_revenue_by_month"]
    fig, ax = plt.subplots(figsize=(4.5, 3.2))
    ax.plot(cum["month"].str[:3], cum["cumulative_revenue"], marker="o")
    ax.tick_params(axis="x", rotation=45)
    ax.set_ylabel("Revenue ($)")
    ax.set_title("Cumulative revenue")
    fig.tight_layout()
    figs["kpi_cumulative_revenue"] = fig

    return figs


def run_kpis(ds: PizzaDataset | None = None, show: bool = False) -> dict[str, pd.DataFrame]:
    if ds is None:
        ds = load_dataset()

    if ds.orders.empty:
        print("No orders to report on.")
        return {}

    results = run_all(ds)
    print(render_report(results))

    fig_dir = config.FIG_DIR
    fig_dir.mkdir(parents=True, exist_ok=True)
    for name, fig in build_figures(results).items():
        fig.savefig(fig_dir / f"{name}.png", dpi=160)
        if show:
            plt.show()
        plt.close(fig)

    print("Figures saved to:", fig_dir)
    return results
