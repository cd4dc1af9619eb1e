from __future__ import annotations
import logging
from . import config
from .etl import load_dataset_csv
from .kpis import run_kpis
from .logger import setup_logger
from .schema import validate_dataset
from .seed_master import generate_dataset
from .storage import save_dataset

log = logging.getLogger(__name__)


def main():
    setup_logger()

    if config.RAW_DIR.exists():
        ds = load_dataset_csv(config.RAW_DIR)
    else:
        log.warning("No raw CSVs in %s, generating a synthetic dataset (seed=%d)", config.RAW_DIR, config.SEED)
        ds = generate_dataset(seed=config.SEED)

    # 1) constraints  2) store tables  3) reports + figures
    validate_dataset(ds)
    save_dataset(ds)
    print("Orders loaded:", len(ds.orders), "| line items:", len(ds.order_details))

    run_kpis(ds)

if __name__ == "__main__":
    main()
