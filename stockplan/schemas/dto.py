from typing import Any

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator
from pydantic.alias_generators import to_camel

from stockplan.normalize.quantity import parse_quantity


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Product(CamelModel):
    id: Any = None
    code: str | None = None
    name: str | None = None
    value: float = 0.0


class RawMaterial(CamelModel):
    id: Any = None
    code: str | None = None
    name: str | None = None
    stock_quantity: float = 0.0


class ProductionEntry(CamelModel):
    product_id: Any = None
    code: str | None = None
    name: str | None = None
    quantity: float = 0.0
    unit_value: float = 0.0
    subtotal: float = 0.0

    @property
    def row_total(self) -> float:
        """Subtotal shown for the row; falls back to unit value x quantity when zero."""
        return self.subtotal or self.unit_value * self.quantity


class ProductionPlan(CamelModel):
    entries: list[ProductionEntry] = []
    reported_total: float | None = None

    @computed_field(alias="totalValue")  # type: ignore[misc]
    @property
    def total_value(self) -> float:
        if self.reported_total is not None:
            return self.reported_total
        return sum((e.row_total for e in self.entries), 0.0)


# Outbound forms: user-typed strings in, service JSON out.


class ProductForm(CamelModel):
    code: str
    name: str
    value: float = Field(ge=0)

    @field_validator("value", mode="before")
    @classmethod
    def _parse_value(cls, v: Any) -> Any:
        return parse_quantity(v)

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)


class RawMaterialForm(CamelModel):
    code: str
    name: str
    stock_quantity: float = Field(ge=0)

    @field_validator("stock_quantity", mode="before")
    @classmethod
    def _parse_stock(cls, v: Any) -> Any:
        return parse_quantity(v)

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)


class CompositionForm(CamelModel):
    raw_material_id: int
    quantity_required: float = Field(gt=0)

    @field_validator("raw_material_id", "quantity_required", mode="before")
    @classmethod
    def _parse_numbers(cls, v: Any) -> Any:
        return parse_quantity(v)

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)
