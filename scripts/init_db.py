from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.fleet_payroll.fleet_payroll.database.bootstrap import apply_schema, list_tables

# Tables the wage engine reads and writes.
PAYROLL_TABLES = ("drivers", "depots", "pay_rates", "bank_holidays", "timesheets")


def missing_tables(tables) -> list[str]:
    present = {t.lower() for t in tables}
    return [t for t in PAYROLL_TABLES if t not in present]


def main() -> int:
    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)
    target = f"{db_config.get('user')}@{db_config.get('host')}:{db_config.get('port', 3306)}/{db_config.get('database')}"

    apply_schema(db_config, schema_path=REPO_ROOT / "database" / "schema.sql")

    missing = missing_tables(list_tables(db_config))
    if missing:
        print(f"FAILED: {target} is missing payroll tables: {', '.join(missing)}")
        return 1

    print(f"OK: payroll schema ready on {target} ({', '.join(PAYROLL_TABLES)})")
    return 0


if __name__ == "__main__":
    sys.exit(main())
