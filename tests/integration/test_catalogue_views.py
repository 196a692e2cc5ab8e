import pytest

from stockplan.views.catalogue import ProductView, RawMaterialView


@pytest.mark.asyncio
async def test_product_view_create_edit_delete(service, make_client):
    service.add("GET", "/products", body=[
        {"id": 1, "code": "P1", "name": "Widget", "value": 2.5},
        {"id": 2, "code": "P2", "name": "Gear", "value": 4},
    ])
    service.add("POST", "/products", 201, body={"id": 3})
    service.add("PUT", "/products/1", body={"id": 1})
    service.add("DELETE", "/products/1", 204)

    async with make_client() as client:
        view = ProductView(client)
        await view.load()
        assert view.selected_id == 1

        assert await view.submit(code="P3", name="Bolt", value="1,75") is True
        assert service.last_json("POST") == {"code": "P3", "name": "Bolt", "value": 1.75}
        assert view.feedback.message == "Product created successfully."

        view.start_edit(view.items[0])
        assert view.form == {"code": "P1", "name": "Widget", "value": "2.5"}
        assert await view.submit(code="P1", name="Widget XL", value=3) is True
        assert service.last_json("PUT") == {"code": "P1", "name": "Widget XL", "value": 3.0}
        assert view.feedback.message == "Product updated successfully."
        assert view.editing_id is None

        assert await view.delete(1) is True
        assert view.feedback.message == "Product removed successfully."

    assert [r.method for r in service.requests].count("GET") == 4


@pytest.mark.asyncio
async def test_product_view_reports_errors(service, make_client):
    service.add("GET", "/products", 500, body="db down")
    service.add("POST", "/products", 409, body="Code already in use")
    service.unreachable("DELETE", "/products/9")

    async with make_client() as client:
        view = ProductView(client)
        await view.load()
        assert view.feedback.message == "Error loading products: db down"
        assert view.items == []

        assert await view.submit(code="P1", name="Widget", value="abc") is False
        assert view.feedback.kind == "error"

        assert await view.submit(code="P1", name="Widget", value="2") is False
        assert view.feedback.message == "Error saving product: Code already in use"

        assert await view.delete(9) is False
        assert view.feedback.message.startswith("Error deleting product:")


@pytest.mark.asyncio
async def test_raw_material_view_notifies_on_reload(service, make_client):
    materials = [{"id": 3, "code": "M1", "name": "Steel", "stockQuantity": 10}]
    service.add("GET", "/raw-materials", body=materials)
    service.add("POST", "/raw-materials", 201, body={"id": 4})
    service.add("DELETE", "/raw-materials/3", 204)
    seen = []

    async with make_client() as client:
        view = RawMaterialView(client, on_change=seen.append)
        await view.load()
        assert seen == [materials]

        assert await view.submit(code="M2", name="Copper", stock_quantity=" 2,5 ") is True
        assert service.last_json("POST") == {"code": "M2", "name": "Copper", "stockQuantity": 2.5}
        assert view.feedback.message == "Raw material created successfully."

        view.start_edit(materials[0])
        assert view.form == {"code": "M1", "name": "Steel", "stockQuantity": "10"}
        view.cancel_edit()
        assert view.editing_id is None

        assert await view.delete(3) is True
        assert view.feedback.message == "Raw material removed successfully."

    assert len(seen) == 3
