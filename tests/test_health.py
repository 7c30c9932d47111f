from conftest import create_item, create_tote


def test_health(client):
    for path in ("/api/health", "/"):
        response = client.get(path)
        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "ok"
        assert body["database"] == "connected"
        assert body["timestamp"].endswith("Z")


def test_request_id_header(client):
    response = client.get("/api/health", headers={"X-Request-ID": "abc-123"})
    assert response.headers["x-request-id"] == "abc-123"

    response = client.get("/api/health")
    assert len(response.headers["x-request-id"]) == 32


def test_unknown_path_returns_error_body(client):
    response = client.get("/api/nothing-here")
    assert response.status_code == 404
    assert response.json() == {"error": "Request path invalid"}


def test_dashboard(client):
    tote = create_tote(client, name="Tools")
    for i in range(12):
        create_item(client, tote["id"], name=f"Item {i}")
    create_tote(client, name="Empty")

    response = client.get("/api/dashboard")
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["total_totes"] == 2
    assert data["total_items"] == 12
    assert len(data["recent_items"]) == 10
    assert data["recent_items"][0]["name"] == "Item 11"
    assert data["recent_items"][0]["tote_name"] == "Tools"


def test_schema_check(client):
    response = client.get("/api/schema-check")
    assert response.status_code == 200
    body = response.json()
    assert body["all_tables_present"] is True
    assert body["missing_tables"] == []
    assert body["foreign_keys_enabled"] is True
    for table in ("totes", "items", "item_photos", "item_metadata", "metadata_keys",
                  "item_movement_history", "settings"):
        assert table in body["tables"]

    item_fks = body["schemas"]["items"]["foreign_keys"]
    assert any(fk["references_table"] == "totes" and fk["on_delete"] == "CASCADE" for fk in item_fks)
