import pytest
from pydantic import ValidationError

from stockplan.schemas.dto import CompositionForm, ProductForm, RawMaterialForm


def test_product_form_payload():
    form = ProductForm(code="P1", name="Widget", value="12,50")
    assert form.to_payload() == {"code": "P1", "name": "Widget", "value": 12.5}


def test_raw_material_form_payload():
    form = RawMaterialForm(code="M1", name="Steel", stock_quantity=" 3,5 ")
    assert form.to_payload() == {"code": "M1", "name": "Steel", "stockQuantity": 3.5}


def test_composition_form_payload():
    form = CompositionForm(raw_material_id="3", quantity_required="0,25")
    assert form.to_payload() == {"rawMaterialId": 3, "quantityRequired": 0.25}


def test_forms_reject_bad_quantities():
    with pytest.raises(ValidationError):
        CompositionForm(raw_material_id=3, quantity_required="0")
    with pytest.raises(ValidationError):
        ProductForm(code="P1", name="Widget", value="abc")
    with pytest.raises(ValidationError):
        RawMaterialForm(code="M1", name="Steel", stock_quantity=-1)
