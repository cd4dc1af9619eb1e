import matplotlib
matplotlib.use("Agg")

import pandas as pd
import pytest

from pizza_sales import config
from pizza_sales.etl import PizzaDataset
from pizza_sales.schema import columns


def make_dataset(pizza_types, pizzas, orders, details) -> PizzaDataset:
    return PizzaDataset.from_frames(
        orders=pd.DataFrame(orders, columns=columns("orders")),
        pizza_types=pd.DataFrame(pizza_types, columns=columns("pizza_types")),
        pizzas=pd.DataFrame(pizzas, columns=columns("pizzas")),
        order_details=pd.DataFrame(details, columns=columns("order_details")),
    )


@pytest.fixture
def small_dataset() -> PizzaDataset:
    pizza_types = [
        ("classic_a", "Classic A", "Classic", "Cheese, Tomato"),
        ("classic_b", "Classic B", "Classic", "Cheese, Ham"),
        ("veggie_a", "Veggie A", "Veggie", "Peppers, Onions"),
        ("chicken_a", "Chicken A", "Chicken", "Chicken, Corn"),
        ("supreme_a", "Supreme A", "Supreme", "Salami, Olives"),
    ]
    pizzas = [
        ("classic_a_s", "classic_a", "S", 10.00),
        ("classic_a_l", "classic_a", "L", 20.00),
        ("classic_b_m", "classic_b", "M", 15.00),
        ("veggie_a_m", "veggie_a", "M", 12.50),
        ("chicken_a_l", "chicken_a", "L", 20.00),
        ("supreme_a_s", "supreme_a", "S", 8.00),
    ]
    orders = [
        (1, "2015-01-01", "11:00:00"),
        (2, "2015-01-01", "12:30:00"),
        (3, "2015-02-01", "12:10:00"),
        (4, "2015-02-15", "18:45:00"),
        (5, "2015-03-10", "19:05:00"),
    ]
    details = [
        (1, 1, "classic_a_s", 2),
        (2, 1, "veggie_a_m", 1),
        (3, 2, "classic_a_l", 1),
        (4, 3, "classic_b_m", 2),
        (5, 3, "chicken_a_l", 1),
        (6, 4, "supreme_a_s", 3),
        (7, 5, "classic_a_s", 1),
        (8, 5, "veggie_a_m", 2),
    ]
    return make_dataset(pizza_types, pizzas, orders, details)


@pytest.fixture
def empty_dataset() -> PizzaDataset:
    return make_dataset([], [], [], [])


@pytest.fixture
def table_dir(tmp_path, monkeypatch):
    monkeypatch.setattr(config, "TABLE_DIR", tmp_path / "tables")
    monkeypatch.setattr(config, "FIG_DIR", tmp_path / "figures")
    return tmp_path / "tables"


@pytest.fixture
def dataset_factory():
    return make_dataset
