from dataclasses import replace

import pandas as pd
import pytest

from pizza_sales.schema import SchemaError, columns, validate_dataset, validate_table


def test_valid_dataset_passes(small_dataset):
    validate_dataset(small_dataset)


def test_empty_dataset_passes(empty_dataset):
    validate_dataset(empty_dataset)


def test_columns_for_unknown_table():
    with pytest.raises(KeyError):
        columns("customers")


def test_missing_column():
    df = pd.DataFrame({"order_id": [1], "date": ["2015-01-01"]})
    with pytest.raises(SchemaError, match="missing column"):
        validate_table("orders", df)


def test_duplicate_primary_key(small_dataset):
    types = pd.concat([small_dataset.pizza_types, small_dataset.pizza_types.head(1)], ignore_index=True)
    with pytest.raises(SchemaError) as exc:
        validate_dataset(replace(small_dataset, pizza_types=types))
    assert exc.value.table == "pizza_types"
    assert exc.value.column == "pizza_type_id"
    assert exc.value.keys == ["classic_a"]


def test_not_null(small_dataset):
    types = small_dataset.pizza_types.copy()
    types.loc[0, "category"] = None
    with pytest.raises(SchemaError, match="NOT NULL"):
        validate_dataset(replace(small_dataset, pizza_types=types))


def test_dangling_foreign_key(small_dataset):
    details = small_dataset.order_details.copy()
    details.loc[0, "pizza_id"] = "calzone_m"
    with pytest.raises(SchemaError) as exc:
        validate_dataset(replace(small_dataset, order_details=details))
    assert exc.value.column == "pizza_id"
    assert exc.value.keys == ["calzone_m"]


def test_line_item_for_unknown_order(small_dataset):
    details = small_dataset.order_details.copy()
    details.loc[0, "order_id"] = 99
    with pytest.raises(SchemaError, match="orders.order_id"):
        validate_dataset(replace(small_dataset, order_details=details))


def test_null_pizza_type_reference_is_allowed(small_dataset):
    pizzas = small_dataset.pizzas.copy()
    pizzas.loc[len(pizzas)] = ["mystery_s", None, "S", 5.0]
    validate_dataset(replace(small_dataset, pizzas=pizzas))


@pytest.mark.parametrize("table,column,value", [
    ("order_details", "quantity", 0),
    ("pizzas", "price", -1.0),
])
def test_lower_bounds(small_dataset, table, column, value):
    df = getattr(small_dataset, table).copy()
    df.loc[0, column] = value
    with pytest.raises(SchemaError, match=">="):
        validate_dataset(replace(small_dataset, **{table: df}))


def test_schema_error_is_a_value_error():
    assert issubclass(SchemaError, ValueError)
