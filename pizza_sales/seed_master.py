from __future__ import annotations
from datetime import date, timedelta
import numpy as np
import pandas as pd
from .config import SEED
from .etl import PizzaDataset
from .storage import save_dataset

# pizza_type_id, name, category, ingredients, price of the small size
MENU = [
    ("classic_dlx", "The Classic Deluxe Pizza", "Classic", "Pepperoni, Mushrooms, Red Onions, Red Peppers, Bacon", 12.00),
    ("hawaiian", "The Hawaiian Pizza", "Classic", "Sliced Ham, Pineapple, Mozzarella Cheese", 10.50),
    ("pepperoni", "The Pepperoni Pizza", "Classic", "Mozzarella Cheese, Pepperoni", 9.75),
    ("big_meat", "The Big Meat Pizza", "Classic", "Bacon, Pepperoni, Italian Sausage, Chorizo Sausage", 12.00),
    ("the_greek", "The Greek Pizza", "Classic", "Kalamata Olives, Feta Cheese, Tomatoes, Garlic, Beef Chuck Roast, Red Onions", 12.00),
    ("four_cheese", "The Four Cheese Pizza", "Veggie", "Ricotta Cheese, Gorgonzola Piccante Cheese, Mozzarella Cheese, Parmigiano Reggiano Cheese, Garlic", 11.75),
    ("veggie_veg", "The Vegetables + Vegetables Pizza", "Veggie", "Mushrooms, Tomatoes, Red Peppers, Green Peppers, Red Onions, Zucchini, Spinach, Garlic", 12.00),
    ("margherita", "The Margherita Pizza", "Veggie", "Tomatoes, Mozzarella Cheese, Basil", 12.00),
    ("mexicana", "The Mexicana Pizza", "Veggie", "Tomatoes, Red Peppers, Jalapeno Peppers, Red Onions, Cilantro, Corn, Chipotle Sauce, Garlic", 12.00),
    ("bbq_ckn", "The Barbecue Chicken Pizza", "Chicken", "Barbecued Chicken, Red Peppers, Green Peppers, Tomatoes, Red Onions, Barbecue Sauce", 12.75),
    ("thai_ckn", "The Thai Chicken Pizza", "Chicken", "Chicken, Pineapple, Tomatoes, Red Peppers, Thai Sweet Chilli Sauce", 12.75),
    ("cali_ckn", "The California Chicken Pizza", "Chicken", "Chicken, Artichoke, Spinach, Garlic, Jalapeno Peppers, Fontina Cheese, Gouda Cheese", 12.75),
    ("southw_ckn", "The Southwest Chicken Pizza", "Chicken", "Chicken, Tomatoes, Red Peppers, Red Onions, Jalapeno Peppers, Corn, Cilantro, Chipotle Sauce", 12.75),
    ("spicy_ital", "The Spicy Italian Pizza", "Supreme", "Capocollo, Tomatoes, Goat Cheese, Artichokes, Peperoncini verdi, Garlic", 12.50),
    ("ital_supr", "The Italian Supreme Pizza", "Supreme", "Calabrese Salami, Capocollo, Tomatoes, Red Onions, Green Olives, Garlic", 12.50),
    ("sicilian", "The Sicilian Pizza", "Supreme", "Coarse Sicilian Salami, Tomatoes, Green Olives, Luganega Sausage, Onions, Garlic", 12.25),
    ("prsc_argla", "The Prosciutto and Arugula Pizza", "Supreme", "Prosciutto di San Daniele, Arugula, Mozzarella Cheese", 12.50),
]

SIZE_MARKUP = {"S": 0.0, "M": 4.0, "L": 8.5}
# only the Greek comes in the party sizes
PARTY_SIZES = {"the_greek": {"XL": 13.5, "XXL": 23.95}}

# opening hours and their relative weight (lunch and dinner peaks)
HOURS = np.arange(9, 24)
HOUR_WEIGHTS = np.array([1, 2, 8, 24, 25, 19, 10, 13, 18, 20, 16, 10, 5, 2, 1], dtype=float)


def generate_menu():
    pizza_types = pd.DataFrame(
        [m[:4] for m in MENU], columns=["pizza_type_id", "name", "category", "ingredients"]
    )
    rows = []
    for type_id, _, _, _, base in MENU:
        sizes = {**SIZE_MARKUP, **PARTY_SIZES.get(type_id, {})}
        for size, markup in sizes.items():
            rows.append({
                "pizza_id": f"{type_id}_{size.lower()}",
                "pizza_type_id": type_id,
                "size": size,
                "price": round(base + markup, 2),
            })
    return pizza_types, pd.DataFrame(rows)


def generate_dataset(n_orders: int = 2000, seed: int = SEED, year: int = 2015) -> PizzaDataset:
    rng = np.random.default_rng(seed)
    pizza_types, pizzas = generate_menu()

    first = date(year, 1, 1)
    days = (date(year + 1, 1, 1) - first).days
    day_offsets = np.sort(rng.integers(0, days, size=n_orders))
    hours = rng.choice(HOURS, size=n_orders, p=HOUR_WEIGHTS / HOUR_WEIGHTS.sum())
    minutes = rng.integers(0, 60, size=n_orders)
    seconds = rng.integers(0, 60, size=n_orders)

    orders = pd.DataFrame({
        "order_id": np.arange(1, n_orders + 1),
        "date": [(first + timedelta(days=int(d))).isoformat() for d in day_offsets],
        "time": [f"{h:02d}:{m:02d}:{s:02d}" for h, m, s in zip(hours, minutes, seconds)],
    })
    # chronological within each day
    orders = orders.sort_values(["date", "time"]).reset_index(drop=True)
    orders["order_id"] = np.arange(1, n_orders + 1)

    popularity = rng.uniform(0.5, 2.0, size=len(pizzas))
    popularity = popularity / popularity.sum()

    details = []
    for oid in orders["order_id"]:
        k = int(rng.integers(1, 5))
        picks = rng.choice(len(pizzas), size=k, replace=False, p=popularity)
        for idx in picks:
            details.append({
                "order_details_id": len(details) + 1,
                "order_id": int(oid),
                "pizza_id": pizzas["pizza_id"].iloc[int(idx)],
                "quantity": int(rng.choice([1, 2, 3], p=[0.9, 0.08, 0.02])),
            })

    return PizzaDataset.from_frames(orders, pizza_types, pizzas, pd.DataFrame(details))


def seed_and_save(n_orders: int = 2000, seed: int = SEED) -> PizzaDataset:
    ds = generate_dataset(n_orders=n_orders, seed=seed)
    save_dataset(ds)
    return ds
