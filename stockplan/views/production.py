"""Production suggestion view: fetch, normalize, rank and format for display.

States go Loading -> Ready or Loading -> Failed; ``refresh()`` returns to
Loading. There is no polling or automatic retry, and a refresh that resolves
after a newer one overwrites it.
"""

from __future__ import annotations

import enum
import logging

from stockplan.core.errors import SERVICE_FAILURES
from stockplan.schemas.dto import ProductionEntry, ProductionPlan
from stockplan.service.client import ManufacturingClient
from stockplan.views.feedback import Feedback

logger = logging.getLogger(__name__)

COLUMNS = ("Product code", "Product name", "Unit value", "Quantity producible", "Total value")


class ViewState(str, enum.Enum):
    LOADING = "loading"
    READY = "ready"
    FAILED = "failed"


def format_row(entry: ProductionEntry) -> tuple[str, str, str, str, str]:
    return (
        entry.code or "",
        entry.name or "",
        f"${entry.unit_value:.2f}",
        f"{entry.quantity:.2f}",
        f"${entry.row_total:.2f}",
    )


class ProductionView:
    def __init__(self, client: ManufacturingClient) -> None:
        self._client = client
        self.state = ViewState.LOADING
        self.plan = ProductionPlan()
        self.feedback = Feedback()

    @property
    def error(self) -> str | None:
        return self.feedback.message if self.state is ViewState.FAILED else None

    async def load(self) -> ProductionPlan:
        self.state = ViewState.LOADING
        self.feedback = Feedback()
        try:
            plan = await self._client.production.plan()
        except SERVICE_FAILURES as e:
            logger.warning("production suggestion failed: %s", e)
            self.plan = ProductionPlan()
            self.feedback = Feedback.error(f"Error loading production suggestion: {e}")
            self.state = ViewState.FAILED
            return self.plan
        self.plan = plan
        self.state = ViewState.READY
        return plan

    async def refresh(self) -> ProductionPlan:
        return await self.load()

    def rows(self) -> list[tuple[str, str, str, str, str]]:
        return [format_row(e) for e in self.plan.entries]

    def total_label(self) -> str:
        return f"Estimated production value: ${self.plan.total_value:.2f}"
