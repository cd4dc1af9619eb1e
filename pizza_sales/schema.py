from __future__ import annotations
import logging
import pandas as pd

log = logging.getLogger(__name__)

# name -> columns, primary key, NOT NULL columns (the primary key is implied)
TABLES = {
    "orders": {
        "columns": ["order_id", "date", "time"],
        "primary_key": "order_id",
        "not_null": [],
    },
    "pizza_types": {
        "columns": ["pizza_type_id", "name", "category", "ingredients"],
        "primary_key": "pizza_type_id",
        "not_null": ["name", "category", "ingredients"],
    },
    "pizzas": {
        "columns": ["pizza_id", "pizza_type_id", "size", "price"],
        "primary_key": "pizza_id",
        "not_null": ["size"],
    },
    "order_details": {
        "columns": ["order_details_id", "order_id", "pizza_id", "quantity"],
        "primary_key": "order_details_id",
        "not_null": ["order_id", "pizza_id", "quantity"],
    },
}

# (table, column) -> (parent table, parent key)
FOREIGN_KEYS = {
    ("pizzas", "pizza_type_id"): ("pizza_types", "pizza_type_id"),
    ("order_details", "order_id"): ("orders", "order_id"),
    ("order_details", "pizza_id"): ("pizzas", "pizza_id"),
}

# table, column, lower bound (inclusive)
LOWER_BOUNDS = [
    ("order_details", "quantity", 1),
    ("pizzas", "price", 0),
]


class SchemaError(ValueError):
    """A table breaks one of the declared constraints."""

    def __init__(self, table: str, column: str, message: str, keys=None):
        self.table = table
        self.column = column
        self.keys = list(keys) if keys is not None else []
        detail = f" (keys: {self.keys[:5]})" if self.keys else ""
        super().__init__(f"{table}.{column}: {message}{detail}")


def columns(table: str) -> list[str]:
    if table not in TABLES:
        raise KeyError(f"Unknown table: {table}")
    return list(TABLES[table]["columns"])


def _sample_keys(df: pd.DataFrame, mask: pd.Series, pk: str) -> list:
    return df.loc[mask, pk].tolist()


def validate_table(name: str, df: pd.DataFrame) -> None:
    table = TABLES[name]
    pk = table["primary_key"]

    missing = [c for c in table["columns"] if c not in df.columns]
    if missing:
        raise SchemaError(name, ",".join(missing), "missing column(s)")

    if df[pk].isna().any():
        raise SchemaError(name, pk, "primary key cannot be null")
    dup = df[pk].duplicated(keep=False)
    if dup.any():
        raise SchemaError(name, pk, "duplicate primary key", df.loc[dup, pk].unique())

    for col in table["not_null"]:
        nulls = df[col].isna()
        if nulls.any():
            raise SchemaError(name, col, "NOT NULL violated", _sample_keys(df, nulls, pk))


def validate_dataset(dataset) -> None:
    """Check every table, then foreign keys and value bounds. Raises SchemaError."""
    tables = {name: getattr(dataset, name) for name in TABLES}
    for name, df in tables.items():
        validate_table(name, df)

    for (table, col), (parent, parent_key) in FOREIGN_KEYS.items():
        df = tables[table]
        values = df[col]
        dangling = values.notna() & ~values.isin(tables[parent][parent_key])
        if dangling.any():
            raise SchemaError(table, col, f"references missing {parent}.{parent_key}",
                              values[dangling].unique())

    for table, col, lower in LOWER_BOUNDS:
        df = tables[table]
        values = pd.to_numeric(df[col], errors="coerce")
        bad = values.notna() & (values < lower)
        if bad.any():
            raise SchemaError(table, col, f"must be >= {lower}",
                              _sample_keys(df, bad, TABLES[table]["primary_key"]))

    log.info("Dataset valid: %s", ", ".join(f"{n}={len(df)}" for n, df in tables.items()))
