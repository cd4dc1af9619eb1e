from __future__ import annotations
import pandas as pd

REPORT_TEXT = """The dataset records one year of sales from a pizza restaurant in four tables: orders (date and time of each
customer order), order_details (one row per pizza in an order, with its quantity), pizzas (each sellable size of a recipe
and its price) and pizza_types (recipe name, category and ingredients). Revenue is always quantity times the unit price
of the pizza ordered. Monthly figures are grouped by month name, so the same month of different years is added together,
and the day/hour distribution groups by day of month. When no raw CSVs are available a synthetic dataset with the same
shape is generated from a fixed seed so every figure can be reproduced.
"""

SECTIONS = {
    "Basics": [
        ("total_orders", "Total number of orders"),
        ("total_revenue", "Total revenue"),
        ("highest_priced_pizza", "Highest-priced pizza"),
        ("most_common_size", "Most common pizza size ordered"),
        ("top_pizzas_by_quantity", "Top 5 most ordered pizzas by quantity"),
    ],
    "Intermediate": [
        ("quantity_by_category", "Quantity ordered per category"),
        ("order_distribution_by_day_hour", "Orders by day of month and hour"),
        ("orders_by_hour", "Orders by hour of day"),
        ("pizza_count_by_category", "Pizzas on the menu per category"),
        ("average_pizzas_per_day", "Average pizzas ordered per day"),
        ("top_pizza_types_by_revenue", "Top 3 pizza types by revenue"),
    ],
    "Advanced": [
        ("revenue_percentage_by_pizza_type", "Share of revenue per pizza type"),
        ("cumulative_revenue_by_month", "Cumulative revenue by month"),
        ("top_pizza_types_by_revenue_per_category", "Top 3 pizza types by revenue per category"),
    ],
}

TITLES = {name: title for items in SECTIONS.values() for name, title in items}


def render_table(df: pd.DataFrame, max_rows: int = 30) -> str:
    if df.empty:
        return "(no rows)"
    text = df.head(max_rows).to_string(index=False)
    if len(df) > max_rows:
        text += f"\n... {len(df) - max_rows} more row(s)"
    return text


def render_report(results: dict[str, pd.DataFrame], max_rows: int = 30) -> str:
    lines = []
    for section, items in SECTIONS.items():
        lines.append(f"== {section} ==")
        for name, title in items:
            if name not in results:
                continue
            lines.append(f"-- {title}")
            lines.append(render_table(results[name], max_rows=max_rows))
            lines.append("")
    return "\n".join(lines)
