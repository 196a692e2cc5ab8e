from stockplan.normalize.call_shapes import (
    UpdateCall,
    normalize_create_args,
    normalize_delete_args,
    normalize_update_args,
)


def test_create_pair_and_positional_shapes_agree():
    expected = {"productId": 7, "rawMaterialId": 3, "requiredQuantity": 5}
    assert normalize_create_args(7, {"rawMaterialId": 3, "requiredQuantity": 5}) == expected
    assert normalize_create_args(7, 3, 5) == expected


def test_create_single_object():
    out = normalize_create_args({"productId": 1, "materialId": 2, "quantity": "1,5"})
    assert out["rawMaterialId"] == 2
    assert out["requiredQuantity"] == 1.5


def test_create_payload_product_id_wins_over_positional():
    assert normalize_create_args(7, {"productId": 8})["productId"] == 8


def test_create_unrecognized_shapes_give_empty_payload():
    assert normalize_create_args() == {}
    assert normalize_create_args(7) == {}
    assert normalize_create_args(7, "x") == {}


def test_update_association_and_payload():
    call = normalize_update_args(11, {"materialId": 3, "quantity": 2})
    assert call == UpdateCall(11, {"materialId": 3, "quantity": 2, "rawMaterialId": 3, "requiredQuantity": 2})


def test_update_ignores_legacy_leading_argument():
    call = normalize_update_args(7, 11, {"rawMaterialId": 3, "requiredQuantity": 2})
    assert call.association_id == 11
    assert call.payload == {"rawMaterialId": 3, "requiredQuantity": 2}


def test_update_positional_fields():
    call = normalize_update_args(None, 11, 7, 3, 2)
    assert call == UpdateCall(11, {"productId": 7, "rawMaterialId": 3, "requiredQuantity": 2})

    call = normalize_update_args(None, 11, 7, 3)
    assert call.payload == {"productId": 7, "rawMaterialId": 3}


def test_update_fallback():
    assert normalize_update_args(11) == UpdateCall(11, {})
    assert normalize_update_args(11, "raw") == UpdateCall(11, "raw")
    assert normalize_update_args() == UpdateCall(None, {})


def test_delete_shapes():
    assert normalize_delete_args(11) == 11
    assert normalize_delete_args(7, 11) == 11
    assert normalize_delete_args() is None
