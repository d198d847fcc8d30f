"""Run one periodic tick (timeout sweep + missed-hours refresh).

Schedule with cron every 15-60 minutes, e.g.:
    */30 * * * * cd /srv/hours-ledger && APP_ENV=production python scripts/run_tick.py
"""

from __future__ import annotations

import importlib
import logging
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv

from config import get_settings_module

from src.hours_ledger.hours_ledger.container import LedgerConfig, build_container
from src.hours_ledger.hours_ledger.events import PeriodicTick


def main() -> int:
    load_dotenv(override=False)
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s [%(name)s] %(message)s")

    settings = importlib.import_module(get_settings_module())
    container = build_container(config=LedgerConfig.from_settings(settings))
    result = container.dispatcher.dispatch(PeriodicTick())
    if not result.ok:
        print(f"Tick failed: {result.message}")
        return 1

    print(f"OK: timed out {len(result.value.timed_out)} member(s): {', '.join(result.value.timed_out) or '-'}")
    if result.value.failed:
        print(f"Could not time out: {', '.join(result.value.failed)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
