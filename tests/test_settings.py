from conftest import create_tote


def test_default_settings_seeded(client):
    response = client.get("/api/settings")
    assert response.status_code == 200
    settings = response.json()["settings"]
    assert settings["server_hostname"] == "http://localhost:3000"
    assert settings["max_upload_size"] == str(5 * 1024 * 1024)
    assert settings["default_metadata_keys"] == "[]"
    assert settings["theme"] == "light"


def test_update_settings_upserts_values(client):
    response = client.put(
        "/api/settings",
        json={"settings": {"theme": "dark", "custom_flag": True, "default_tote_fields": ["size", "color"]}},
    )
    assert response.status_code == 200
    settings = response.json()["settings"]
    assert settings["theme"] == "dark"
    assert settings["custom_flag"] == "true"
    assert settings["default_tote_fields"] == '["size", "color"]'
    assert settings["server_hostname"] == "http://localhost:3000"

    assert client.get("/api/settings").json()["settings"]["theme"] == "dark"


def test_update_settings_requires_object(client):
    for body in ({}, {"settings": None}, {"settings": "dark"}, {"settings": ["theme"]}):
        response = client.put("/api/settings", json=body)
        assert response.status_code == 400
        assert response.json() == {"error": "Settings object is required"}


def test_server_hostname_setting_used_for_qr(client):
    tote = create_tote(client)
    client.put("/api/settings", json={"settings": {"server_hostname": "https://totes.example.com"}})

    response = client.get(f"/api/totes/{tote['id']}/qr", params={"format": "dataurl"})
    assert response.json()["data"]["encoded_url"] == f"https://totes.example.com/totes/{tote['id']}"


def test_invalid_max_upload_size_falls_back_to_default(client):
    from conftest import create_item, upload_photo

    tote = create_tote(client)
    item = create_item(client, tote["id"])
    client.put("/api/settings", json={"settings": {"max_upload_size": "lots"}})
    assert upload_photo(client, item["id"]).status_code == 201
