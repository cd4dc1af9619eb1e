from __future__ import annotations
import os
from pathlib import Path

SEED = 42

# Raw CSVs: orders.csv, pizza_types.csv, pizzas.csv, order_details.csv
RAW_DIR = Path(os.environ.get("PIZZA_RAW_DIR", "pizza_sales_data"))

BASE_DIR = Path(".")
TABLE_DIR = Path(os.environ.get("PIZZA_TABLE_DIR", BASE_DIR / "tables_csv"))
FIG_DIR = Path(os.environ.get("PIZZA_FIG_DIR", BASE_DIR / "figures"))

LOG_LEVEL = os.environ.get("PIZZA_LOG_LEVEL", "INFO")

TOP_PIZZAS_BY_QUANTITY = 5
TOP_PIZZAS_BY_REVENUE = 3
TOP_PER_CATEGORY = 3

CATEGORY_ORDER = ("Classic", "Veggie", "Chicken", "Supreme")
SIZE_ORDER = ("S", "M", "L", "XL", "XXL")

MONTHS = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)
