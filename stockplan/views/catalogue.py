"""Product and raw-material catalogue editors.

Both keep the last loaded list, an edit-in-progress form and a feedback
banner, and reload the list after every successful change.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Mapping

from pydantic import BaseModel, ValidationError

from stockplan.core.errors import SERVICE_FAILURES
from stockplan.schemas.dto import ProductForm, RawMaterialForm
from stockplan.service.client import CrudResource, ManufacturingClient
from stockplan.views.feedback import Feedback

logger = logging.getLogger(__name__)


class _CatalogueView:
    singular = ""
    plural = ""
    form_class: type[BaseModel]
    empty_form: dict[str, str] = {}

    def __init__(self, client: ManufacturingClient) -> None:
        self._client = client
        self.items: list[Any] = []
        self.editing_id: Any = None
        self.form: dict[str, str] = dict(self.empty_form)
        self.feedback = Feedback()

    @property
    def resource(self) -> CrudResource:
        raise NotImplementedError

    async def load(self) -> list[Any]:
        try:
            data = await self.resource.list()
        except SERVICE_FAILURES as e:
            self.feedback = Feedback.error(f"Error loading {self.plural}: {e}")
            return self.items
        self.items = data if isinstance(data, list) else []
        self._loaded()
        return self.items

    def _loaded(self) -> None:
        pass

    def start_edit(self, item: Mapping[str, Any]) -> None:
        self.editing_id = item.get("id")
        self.form = {key: str(item.get(key, "")) for key in self.empty_form}

    def cancel_edit(self) -> None:
        self.editing_id = None
        self.form = dict(self.empty_form)

    async def submit(self, **values: Any) -> bool:
        """Create, or update the item being edited. Returns True on success."""
        label = self.singular.capitalize()
        try:
            payload = self.form_class(**values).to_payload()  # type: ignore[attr-defined]
        except ValidationError as e:
            self.feedback = Feedback.error(f"Error saving {self.singular}: {e.errors()[0]['msg']}")
            return False

        try:
            if self.editing_id is not None:
                await self.resource.update(self.editing_id, payload)
                self.feedback = Feedback.success(f"{label} updated successfully.")
            else:
                await self.resource.create(payload)
                self.feedback = Feedback.success(f"{label} created successfully.")
        except SERVICE_FAILURES as e:
            logger.warning("saving %s failed: %s", self.singular, e)
            self.feedback = Feedback.error(f"Error saving {self.singular}: {e}")
            return False

        self.cancel_edit()
        await self.load()
        return True

    async def delete(self, item_id: Any) -> bool:
        try:
            await self.resource.delete(item_id)
        except SERVICE_FAILURES as e:
            self.feedback = Feedback.error(f"Error deleting {self.singular}: {e}")
            return False
        self.feedback = Feedback.success(f"{self.singular.capitalize()} removed successfully.")
        self._deleted(item_id)
        await self.load()
        return True

    def _deleted(self, item_id: Any) -> None:
        pass


class ProductView(_CatalogueView):
    singular = "product"
    plural = "products"
    form_class = ProductForm
    empty_form = {"code": "", "name": "", "value": ""}

    def __init__(self, client: ManufacturingClient) -> None:
        super().__init__(client)
        self.selected_id: Any = None

    @property
    def resource(self) -> CrudResource:
        return self._client.products

    def _loaded(self) -> None:
        # first product is selected until the user picks another one
        if self.items and self.selected_id is None and isinstance(self.items[0], Mapping):
            self.selected_id = self.items[0].get("id")

    def _deleted(self, item_id: Any) -> None:
        if self.selected_id == item_id:
            self.selected_id = None


class RawMaterialView(_CatalogueView):
    singular = "raw material"
    plural = "raw materials"
    form_class = RawMaterialForm
    empty_form = {"code": "", "name": "", "stockQuantity": ""}

    def __init__(
        self,
        client: ManufacturingClient,
        on_change: Callable[[list[Any]], None] | None = None,
    ) -> None:
        super().__init__(client)
        self._on_change = on_change

    @property
    def resource(self) -> CrudResource:
        return self._client.raw_materials

    def _loaded(self) -> None:
        if self._on_change is not None:
            self._on_change(self.items)
