import io
import json
import zipfile

from app.core.core_config import settings
from conftest import create_item, create_tote, make_image_bytes, upload_photo

MANIFEST_NAME = "tote-sonar-data.json"
TABLES = ["totes", "items", "item_photos", "item_metadata", "metadata_keys", "item_movement_history", "settings"]


def _seed(client):
    tools = create_tote(client, name="Tools", location="Garage", owner="Sam")
    spares = create_tote(client, name="Spares", location="Attic")
    hammer = create_item(client, tools["id"], name="Hammer", quantity=2)
    client.post(f"/api/items/{hammer['id']}/metadata", json={"key": "Brand", "value": "Acme"})
    client.post(f"/api/items/{hammer['id']}/move", json={"target_tote_id": spares["id"]})
    photo = upload_photo(client, hammer["id"], content=make_image_bytes()).json()["data"]
    client.put("/api/settings", json={"settings": {"theme": "dark"}})
    return tools, spares, hammer, photo


def _zip(entries):
    buf = io.BytesIO()
    with zipfile.ZipFile(buf, "w") as zf:
        for name, content in entries.items():
            zf.writestr(name, content)
    return buf.getvalue()


def _import(client, content, filename="backup.zip", content_type="application/zip"):
    return client.post("/api/import", files={"file": (filename, content, content_type)})


def _empty_manifest():
    return {"version": "1.0", "app": "Tote Sonar", "exported_at": "2024-01-01T00:00:00Z",
            "data": {name: [] for name in TABLES}}


def test_export_archive_contents(client):
    _, _, _, photo = _seed(client)

    response = client.get("/api/export")
    assert response.status_code == 200
    assert response.headers["content-type"] == "application/zip"
    disposition = response.headers["content-disposition"]
    assert disposition.startswith('attachment; filename="tote-sonar-export-')
    assert disposition.endswith('.zip"')

    with zipfile.ZipFile(io.BytesIO(response.content)) as zf:
        names = zf.namelist()
        assert MANIFEST_NAME in names
        assert photo["original_path"] in names
        assert photo["thumbnail_path"] in names
        manifest = json.loads(zf.read(MANIFEST_NAME))

    assert manifest["version"] == "1.0"
    assert manifest["app"] == "Tote Sonar"
    assert sorted(manifest["data"]) == sorted(TABLES)
    assert len(manifest["data"]["totes"]) == 2
    assert manifest["data"]["items"][0]["quantity"] == 2
    assert len(manifest["data"]["item_movement_history"]) == 1
    settings_rows = {row["key"]: row["value"] for row in manifest["data"]["settings"]}
    assert settings_rows["theme"] == "dark"


def test_export_then_import_restores_everything(client):
    tools, spares, hammer, photo = _seed(client)
    archive = client.get("/api/export").content

    # 匯出後再改動資料，匯入應完整取代
    create_tote(client, name="Temporary", location="Shed")
    client.delete(f"/api/photos/{photo['id']}")
    client.put("/api/settings", json={"settings": {"theme": "light"}})

    response = _import(client, archive)
    assert response.status_code == 200
    assert response.json() == {
        "success": True,
        "message": "Import completed successfully",
        "summary": {"totes": 2, "items": 1, "photos": 1, "metadata": 1, "settings": 5},
    }

    totes = client.get("/api/totes").json()["data"]
    assert sorted(t["id"] for t in totes) == sorted([tools["id"], spares["id"]])

    detail = client.get(f"/api/items/{hammer['id']}").json()["data"]
    assert detail["tote_id"] == spares["id"]
    assert detail["quantity"] == 2
    assert [(m["key"], m["value"]) for m in detail["metadata"]] == [("Brand", "Acme")]
    assert len(detail["movement_history"]) == 1
    assert [p["id"] for p in detail["photos"]] == [photo["id"]]

    assert (settings.data_dir / photo["original_path"]).is_file()
    assert client.get(f"/api/photos/{photo['id']}").status_code == 200
    assert client.get("/api/settings").json()["settings"]["theme"] == "dark"


def test_import_replaces_existing_photo_files(client):
    tote = create_tote(client)
    item = create_item(client, tote["id"])
    old_photo = upload_photo(client, item["id"]).json()["data"]

    response = _import(client, _zip({MANIFEST_NAME: json.dumps(_empty_manifest())}))
    assert response.status_code == 200
    assert response.json()["summary"] == {"totes": 0, "items": 0, "photos": 0, "metadata": 0, "settings": 0}
    assert client.get("/api/totes").json()["data"] == []
    assert not (settings.data_dir / old_photo["original_path"]).exists()


def test_import_fills_missing_timestamps_and_defaults(client):
    manifest = _empty_manifest()
    manifest["data"]["totes"] = [{"id": "abc123", "name": "Tools", "location": "Garage", "owner": ""}]
    manifest["data"]["items"] = [{"id": 1, "tote_id": "abc123", "name": "Hammer"}]

    response = _import(client, _zip({MANIFEST_NAME: json.dumps(manifest)}))
    assert response.status_code == 200

    tote = client.get("/api/totes/abc123").json()["data"]
    assert tote["owner"] is None
    assert tote["created_at"]
    assert tote["items"][0]["quantity"] == 1
    assert tote["items"][0]["created_at"]


def test_item_with_missing_tote_is_still_readable_after_import(client):
    manifest = _empty_manifest()
    manifest["data"]["totes"] = [{"id": "abc123", "name": "Tools", "location": "Garage"}]
    manifest["data"]["items"] = [{"id": 1, "tote_id": "gone01", "name": "Hammer", "quantity": 1}]
    manifest["data"]["item_movement_history"] = [
        {"id": 1, "item_id": 1, "from_tote_id": "abc123", "to_tote_id": "gone01", "moved_at": "2024-01-02 00:00:00"},
    ]

    assert _import(client, _zip({MANIFEST_NAME: json.dumps(manifest)})).status_code == 200

    response = client.get("/api/items/1")
    assert response.status_code == 200
    detail = response.json()["data"]
    assert detail["tote_id"] == "gone01"
    assert detail["tote_name"] is None
    assert detail["tote_location"] is None
    [entry] = detail["movement_history"]
    assert entry["from_tote_name"] == "Tools"
    assert entry["to_tote_name"] is None

    [found] = client.get("/api/search", params={"q": "Hammer"}).json()["data"]["items"]
    assert found["id"] == 1 and found["tote_name"] is None
    dashboard = client.get("/api/dashboard").json()["data"]
    assert [item["id"] for item in dashboard["recent_items"]] == [1]


def test_import_extracts_files_by_base_name_only(client):
    manifest = json.dumps(_empty_manifest())
    content = _zip({
        MANIFEST_NAME: manifest,
        "uploads/../../escape.png": b"x",
        "uploads/good.png": b"y",
        "other/ignored.png": b"z",
    })

    assert _import(client, content).status_code == 200
    assert (settings.upload_dir / "good.png").read_bytes() == b"y"
    assert (settings.upload_dir / "escape.png").read_bytes() == b"x"
    assert not (settings.data_dir.parent / "escape.png").exists()
    assert not (settings.upload_dir / "ignored.png").exists()


def test_import_rejects_invalid_uploads(client):
    tote = create_tote(client)

    response = client.post("/api/import")
    assert response.status_code == 400
    assert response.json() == {"error": "No file uploaded. Please select a ZIP file."}

    response = _import(client, b"hello", filename="notes.txt", content_type="text/plain")
    assert response.status_code == 400
    assert response.json() == {"error": "Invalid file type. Please upload a .zip file exported from Tote Sonar."}

    response = _import(client, b"not really a zip")
    assert response.status_code == 400
    assert response.json() == {"error": "Invalid ZIP file. The file could not be read as a ZIP archive."}

    response = _import(client, _zip({"readme.txt": "hi"}))
    assert response.status_code == 400
    assert response.json() == {"error": "Invalid export file. Missing tote-sonar-data.json in the ZIP archive."}

    response = _import(client, _zip({MANIFEST_NAME: "{broken"}))
    assert response.status_code == 400
    assert response.json() == {"error": "Invalid JSON in export file. The tote-sonar-data.json could not be parsed."}

    manifest = _empty_manifest()
    del manifest["data"]["settings"]
    response = _import(client, _zip({MANIFEST_NAME: json.dumps(manifest)}))
    assert response.status_code == 400
    assert response.json() == {
        "error": "Invalid export data structure. The JSON file is missing required fields or tables."
    }

    # 驗證失敗不會動到既有資料
    assert [t["id"] for t in client.get("/api/totes").json()["data"]] == [tote["id"]]


def test_import_failure_keeps_foreign_keys_enabled(client):
    manifest = _empty_manifest()
    manifest["data"]["totes"] = ["not an object"]

    response = _import(client, _zip({MANIFEST_NAME: json.dumps(manifest)}))
    assert response.status_code == 500
    assert response.json() == {"error": "Failed to import data. An unexpected error occurred."}
    assert client.get("/api/schema-check").json()["foreign_keys_enabled"] is True
