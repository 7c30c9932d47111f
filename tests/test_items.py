import pytest

from conftest import create_item, create_tote, upload_photo


def test_create_item_defaults_quantity_to_one(client):
    tote = create_tote(client)
    response = client.post(f"/api/totes/{tote['id']}/items", json={"name": " Hammer ", "description": "  "})
    assert response.status_code == 201
    item = response.json()["data"]
    assert item["name"] == "Hammer"
    assert item["description"] is None
    assert item["quantity"] == 1
    assert item["tote_id"] == tote["id"]


@pytest.mark.parametrize("quantity, expected", [(2, 2), ("3", 3), ("4.0", 4), (5.0, 5)])
def test_create_item_accepts_whole_number_quantities(client, quantity, expected):
    tote = create_tote(client)
    item = create_item(client, tote["id"], quantity=quantity)
    assert item["quantity"] == expected


@pytest.mark.parametrize("quantity", [0, -1, 1.5, "abc", "", None, True, [2], 10 ** 20, "1e30"])
def test_create_item_rejects_invalid_quantity(client, quantity):
    tote = create_tote(client)
    response = client.post(f"/api/totes/{tote['id']}/items", json={"name": "Hammer", "quantity": quantity})
    assert response.status_code == 400
    assert response.json() == {"error": "Quantity must be a positive whole number"}


def test_create_item_requires_name_and_existing_tote(client):
    tote = create_tote(client)

    response = client.post(f"/api/totes/{tote['id']}/items", json={"quantity": 1})
    assert response.status_code == 400
    assert response.json() == {"error": "Name is required and must be a string"}

    response = client.post(f"/api/totes/{tote['id']}/items", json={"name": "   "})
    assert response.status_code == 400
    assert response.json() == {"error": "Name is required"}

    response = client.post("/api/totes/ZZZZZZ/items", json={"name": "Hammer"})
    assert response.status_code == 404
    assert response.json() == {"error": "Tote not found"}


def test_list_tote_items(client):
    tote = create_tote(client)
    create_item(client, tote["id"], name="Hammer")
    create_item(client, tote["id"], name="Saw")

    response = client.get(f"/api/totes/{tote['id']}/items")
    assert response.status_code == 200
    assert [item["name"] for item in response.json()["data"]] == ["Saw", "Hammer"]

    assert client.get("/api/totes/ZZZZZZ/items").status_code == 404


def test_get_item_detail(client):
    tote = create_tote(client, name="Tools", location="Garage")
    item = create_item(client, tote["id"])
    client.post(f"/api/items/{item['id']}/metadata", json={"key": "Brand", "value": "Acme"})

    response = client.get(f"/api/items/{item['id']}")
    assert response.status_code == 200
    detail = response.json()["data"]
    assert detail["tote_name"] == "Tools"
    assert detail["tote_location"] == "Garage"
    assert [(m["key"], m["value"]) for m in detail["metadata"]] == [("Brand", "Acme")]
    assert detail["photos"] == []
    assert detail["movement_history"] == []


def test_get_item_not_found_and_non_integer_id(client):
    response = client.get("/api/items/999")
    assert response.status_code == 404
    assert response.json() == {"error": "Item not found"}

    response = client.get("/api/items/abc")
    assert response.status_code == 400


def test_update_item(client):
    tote = create_tote(client)
    item = create_item(client, tote["id"], description="Claw")

    response = client.put(f"/api/items/{item['id']}", json={"quantity": "7", "description": ""})
    assert response.status_code == 200
    updated = response.json()["data"]
    assert updated["name"] == "Hammer"
    assert updated["quantity"] == 7
    assert updated["description"] is None

    response = client.put(f"/api/items/{item['id']}", json={})
    assert response.status_code == 400
    assert response.json() == {"error": "No fields to update"}

    response = client.put(f"/api/items/{item['id']}", json={"quantity": 0})
    assert response.status_code == 400

    # 超過 64 位元整數範圍
    response = client.put(f"/api/items/{item['id']}", json={"quantity": 2 ** 63})
    assert response.status_code == 400
    assert client.get(f"/api/items/{item['id']}").json()["data"]["quantity"] == 7

    assert client.put("/api/items/999", json={"name": "X"}).status_code == 404


def test_delete_item_removes_photo_files(client):
    from app.core.core_config import settings

    tote = create_tote(client)
    item = create_item(client, tote["id"])
    photo = upload_photo(client, item["id"]).json()["data"]

    response = client.delete(f"/api/items/{item['id']}")
    assert response.status_code == 200
    assert response.json() == {"message": "Item 'Hammer' deleted successfully"}
    assert not (settings.data_dir / photo["original_path"]).exists()
    assert not (settings.data_dir / photo["thumbnail_path"]).exists()
    assert client.get(f"/api/items/{item['id']}").status_code == 404
    assert client.delete(f"/api/items/{item['id']}").status_code == 404


# ==================== Move ====================

def test_move_item_records_history(client):
    tools = create_tote(client, name="Tools", location="Garage")
    item = create_item(client, tools["id"], quantity=2)
    assert item["quantity"] == 2

    response = client.post(f"/api/items/{item['id']}/move", json={"target_tote_id": tools["id"]})
    assert response.status_code == 400
    assert response.json() == {"error": "Item is already in this tote"}

    spares = create_tote(client, name="Spares", location="Attic")
    response = client.post(f"/api/items/{item['id']}/move", json={"target_tote_id": spares["id"]})
    assert response.status_code == 200
    body = response.json()
    assert body["message"] == 'Item "Hammer" moved to "Spares" successfully'
    assert body["data"]["tote_id"] == spares["id"]
    assert body["data"]["tote_name"] == "Spares"

    history = client.get(f"/api/items/{item['id']}").json()["data"]["movement_history"]
    assert len(history) == 1
    assert history[0]["from_tote_id"] == tools["id"]
    assert history[0]["to_tote_id"] == spares["id"]
    assert history[0]["from_tote_name"] == "Tools"
    assert history[0]["to_tote_name"] == "Spares"


def test_move_item_check_order(client):
    tote = create_tote(client)
    item = create_item(client, tote["id"])

    response = client.post("/api/items/999/move", json={})
    assert response.status_code == 404
    assert response.json() == {"error": "Item not found"}

    response = client.post(f"/api/items/{item['id']}/move", json={})
    assert response.status_code == 400
    assert response.json() == {"error": "target_tote_id is required"}

    response = client.post(f"/api/items/{item['id']}/move", json={"target_tote_id": 42})
    assert response.status_code == 400
    assert response.json() == {"error": "target_tote_id is required"}

    response = client.post(f"/api/items/{item['id']}/move", json={"target_tote_id": "ZZZZZZ"})
    assert response.status_code == 404
    assert response.json() == {"error": "Target tote not found"}


def test_move_history_survives_source_tote_deletion(client):
    tools = create_tote(client, name="Tools")
    spares = create_tote(client, name="Spares")
    item = create_item(client, tools["id"])
    client.post(f"/api/items/{item['id']}/move", json={"target_tote_id": spares["id"]})

    assert client.delete(f"/api/totes/{tools['id']}").status_code == 200

    history = client.get(f"/api/items/{item['id']}").json()["data"]["movement_history"]
    assert len(history) == 1
    assert history[0]["from_tote_id"] is None
    assert history[0]["from_tote_name"] is None
    assert history[0]["to_tote_name"] == "Spares"


# ==================== Duplicate ====================

def test_duplicate_item_copies_metadata_not_photos(client):
    tote = create_tote(client)
    item = create_item(client, tote["id"], description="Claw", quantity=3)
    client.post(f"/api/items/{item['id']}/metadata", json={"key": "Brand", "value": "Acme"})
    client.post(f"/api/items/{item['id']}/metadata", json={"key": "Color", "value": "Red"})
    assert upload_photo(client, item["id"]).status_code == 201

    response = client.post(f"/api/items/{item['id']}/duplicate")
    assert response.status_code == 201
    body = response.json()
    assert body["message"] == 'Item "Hammer" duplicated successfully'
    copy = body["data"]
    assert copy["id"] != item["id"]
    assert copy["name"] == "Hammer (Copy)"
    assert copy["description"] == "Claw"
    assert copy["quantity"] == 3
    assert copy["tote_id"] == tote["id"]

    detail = client.get(f"/api/items/{copy['id']}").json()["data"]
    assert sorted((m["key"], m["value"]) for m in detail["metadata"]) == [("Brand", "Acme"), ("Color", "Red")]
    assert detail["photos"] == []


def test_duplicate_item_into_other_tote(client):
    tools = create_tote(client, name="Tools")
    spares = create_tote(client, name="Spares")
    item = create_item(client, tools["id"])

    response = client.post(f"/api/items/{item['id']}/duplicate", json={"target_tote_id": spares["id"]})
    assert response.status_code == 201
    assert response.json()["data"]["tote_id"] == spares["id"]
    assert response.json()["data"]["tote_name"] == "Spares"

    response = client.post(f"/api/items/{item['id']}/duplicate", json={"target_tote_id": "ZZZZZZ"})
    assert response.status_code == 404
    assert response.json() == {"error": "Target tote not found"}


def test_duplicate_item_tolerates_invalid_body(client):
    tote = create_tote(client)
    item = create_item(client, tote["id"])

    response = client.post(
        f"/api/items/{item['id']}/duplicate",
        content=b"not json",
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 201
    assert response.json()["data"]["tote_id"] == tote["id"]

    assert client.post("/api/items/999/duplicate").status_code == 404
