"""
Print a summary of a meal catalog.

Usage
-----

    # bundled / configured catalog
    python -m scripts.catalog_report

    # any other catalog file (same schema)
    python -m scripts.catalog_report --file path/to/meals.json
"""
from __future__ import annotations

import argparse
from pathlib import Path

import pandas as pd

from core.catalog import MealCatalog, default_catalog, load_catalog


def report(catalog: MealCatalog) -> str:
    df = catalog.frame()
    lines = [f"{len(catalog)} templates", ""]
    lines.append(pd.crosstab(df["slot"], df["diet_type"], margins=True).to_string())
    lines.append("")
    lines.append(pd.crosstab(df["cuisine"], df["slot"], margins=True).to_string())
    lines.append("")
    lines.append(df.groupby("slot")["base_calories"].describe()[["min", "mean", "max"]].to_string())
    return "\n".join(lines)


def main() -> None:
    parser = argparse.ArgumentParser()
    parser.add_argument(
        "--file",
        type=Path,
        help="optional catalog JSON file (defaults to MEALREC_CATALOG_PATH)",
    )
    args = parser.parse_args()

    catalog = load_catalog(args.file) if args.file else default_catalog()
    print(report(catalog))


if __name__ == "__main__":
    main()
