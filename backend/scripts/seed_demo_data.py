#!/usr/bin/env python3
"""
Seed the database with demo fixtures, or upsert products from a JSON file.

Usage:
    python scripts/seed_demo_data.py                 # fixtures into an empty DB
    python scripts/seed_demo_data.py --reset         # drop everything, reseed
    python scripts/seed_demo_data.py --file products.json

The JSON file may be a list of products or an object with an "items" list.
Keys may be camelCase (as exported by the admin panel) or snake_case; rows are
matched on SKU.
"""
import argparse
import json
import logging
import os
import sys

# allow running from repo/scripts
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from pydantic import ValidationError

from vural_api.config import settings
from vural_api.db import SessionLocal, init_db
from vural_api.logging_config import configure_logging
from vural_api.repositories.product_repo import ProductRepository
from vural_api.schemas.product_schema import ProductIn
from vural_api.services.catalog_service import CatalogService

log = logging.getLogger("vural_api.scripts.seed")


def _load_entries(path: str):
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except ValueError as e:
            raise RuntimeError(f"Failed to parse JSON from {path}: {e}")
    if isinstance(data, dict):
        return data.get("items") if isinstance(data.get("items"), list) else list(data.values())
    if isinstance(data, list):
        return data
    return []


def upsert_products(path: str) -> dict:
    entries = _load_entries(path)
    db = SessionLocal()
    svc = CatalogService(db)
    repo = ProductRepository(db)
    stats = {"created": 0, "updated": 0, "skipped": 0}
    try:
        for entry in entries:
            try:
                product = ProductIn.model_validate(entry)
            except ValidationError as e:
                log.warning("skipping entry %r: %s", entry.get("sku") if isinstance(entry, dict) else entry, e)
                stats["skipped"] += 1
                continue
            existing = repo.get_by_sku(product.sku)
            if existing:
                svc.update_product(existing.id, product.model_dump())
                stats["updated"] += 1
            else:
                svc.add_product(product.model_dump())
                stats["created"] += 1
    finally:
        db.close()
    return stats


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Seed Vural Enerji demo data.")
    parser.add_argument("--file", "-f", help="Path to a product JSON file to upsert by SKU")
    parser.add_argument("--reset", action="store_true", help="Drop all tables before seeding")
    args = parser.parse_args()

    configure_logging(settings.LOG_LEVEL)
    init_db(reset=args.reset, seed=args.file is None)

    if args.file:
        if not os.path.exists(args.file):
            print("File not found:", args.file)
            sys.exit(1)
        print("Products:", upsert_products(args.file))
    else:
        print("Fixtures seeded into", settings.DATABASE_URL)
