"""Editing session for one product's composition (its raw-material list)."""

from __future__ import annotations

import logging
from typing import Any, Mapping

from pydantic import ValidationError

from stockplan.core.errors import SERVICE_FAILURES
from stockplan.schemas.dto import CompositionForm
from stockplan.service.client import ManufacturingClient
from stockplan.views.feedback import Feedback

logger = logging.getLogger(__name__)


class CompositionView:
    def __init__(self, client: ManufacturingClient) -> None:
        self._client = client
        self.product_id: Any = None
        self.records: list[Any] = []
        self.editing_id: Any = None
        self.form: dict[str, str] = {"rawMaterialId": "", "quantityRequired": ""}
        self.feedback = Feedback()

    async def select(self, product_id: Any) -> list[Any]:
        self.product_id = product_id
        self.cancel_edit()
        return await self.load()

    async def load(self) -> list[Any]:
        if self.product_id is None:
            self.records = []
            return self.records
        try:
            self.records = await self._client.product_materials.list_by_product(self.product_id)
        except SERVICE_FAILURES as e:
            self.feedback = Feedback.error(f"Error loading composition: {e}")
        return self.records

    def start_edit(self, record: Mapping[str, Any]) -> None:
        self.editing_id = record.get("id")
        self.form = {
            "rawMaterialId": str(record.get("rawMaterialId", "")),
            "quantityRequired": str(record.get("quantityRequired", "")),
        }

    def cancel_edit(self) -> None:
        self.editing_id = None
        self.form = {"rawMaterialId": "", "quantityRequired": ""}

    async def submit(self, raw_material_id: Any, quantity_required: Any) -> bool:
        """Create, or update the record being edited. Returns True on success."""
        if self.product_id is None:
            return False
        try:
            payload = CompositionForm(
                raw_material_id=raw_material_id, quantity_required=quantity_required
            ).to_payload()
        except ValidationError as e:
            self.feedback = Feedback.error(f"Error saving composition: {e.errors()[0]['msg']}")
            return False

        try:
            if self.editing_id is not None:
                await self._client.product_materials.update(self.product_id, self.editing_id, payload)
                self.feedback = Feedback.success("Composition updated successfully.")
            else:
                await self._client.product_materials.create(self.product_id, payload)
                self.feedback = Feedback.success("Composition created successfully.")
        except SERVICE_FAILURES as e:
            logger.warning("saving composition for product %s failed: %s", self.product_id, e)
            self.feedback = Feedback.error(f"Error saving composition: {e}")
            return False

        self.cancel_edit()
        await self.load()
        return True

    async def delete(self, association_id: Any) -> bool:
        if self.product_id is None:
            return False
        try:
            await self._client.product_materials.delete(self.product_id, association_id)
        except SERVICE_FAILURES as e:
            self.feedback = Feedback.error(f"Error deleting composition: {e}")
            return False
        self.feedback = Feedback.success("Composition item removed successfully.")
        await self.load()
        return True
