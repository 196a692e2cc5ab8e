"""Print the production suggestion as a table.

Usage:
  python scripts/show_plan.py [base_url]

Examples:
  python scripts/show_plan.py
  python scripts/show_plan.py http://localhost:8080/api
"""

from __future__ import annotations

import asyncio
import logging
import sys
from typing import Optional

from stockplan.core.config import Settings
from stockplan.service.client import ManufacturingClient
from stockplan.views.production import COLUMNS, ProductionView, ViewState


async def run(settings: Settings) -> int:
    async with ManufacturingClient(settings) as client:
        view = ProductionView(client)
        await view.load()

    if view.state is ViewState.FAILED:
        print(view.error, file=sys.stderr)
        return 1

    rows = [COLUMNS, *view.rows()]
    widths = [max(len(r[i]) for r in rows) for i in range(len(COLUMNS))]
    for row in rows:
        print("  ".join(cell.ljust(w) for cell, w in zip(row, widths)))
    print()
    print(view.total_label())
    return 0


def main(argv: Optional[list[str]] = None) -> None:
    argv = list(sys.argv[1:] if argv is None else argv)
    settings = Settings(api_base_url=argv[0] if argv else None)
    logging.basicConfig(level=settings.LOG_LEVEL.upper())
    raise SystemExit(asyncio.run(run(settings)))


if __name__ == "__main__":
    main()
