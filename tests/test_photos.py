import io

from PIL import Image

from app.core.core_config import settings
from conftest import create_item, create_tote, make_image_bytes, upload_photo


def _item(client):
    tote = create_tote(client)
    return create_item(client, tote["id"])


def test_upload_photo_writes_original_and_thumbnail(client):
    item = _item(client)
    content = make_image_bytes(size=(640, 320))

    response = upload_photo(client, item["id"], content=content)
    assert response.status_code == 201
    body = response.json()
    assert body["message"] == "Photo uploaded successfully"
    photo = body["data"]
    assert photo["item_id"] == item["id"]
    assert photo["mime_type"] == "image/png"
    assert photo["file_size"] == len(content)
    assert photo["filename"].endswith(".png")
    assert photo["original_path"] == f"uploads/{photo['filename']}"
    assert photo["thumbnail_path"] == f"thumbnails/thumb_{photo['filename']}"

    original = settings.data_dir / photo["original_path"]
    assert original.read_bytes() == content
    with Image.open(settings.data_dir / photo["thumbnail_path"]) as thumb:
        assert thumb.size == (200, 200)


def test_upload_jpeg_photo(client):
    item = _item(client)
    response = upload_photo(
        client, item["id"], content=make_image_bytes("JPEG"), filename="a.jpg", mime_type="image/jpeg"
    )
    assert response.status_code == 201
    assert response.json()["data"]["filename"].endswith(".jpg")


def test_upload_photo_limit(client):
    item = _item(client)
    for _ in range(3):
        assert upload_photo(client, item["id"]).status_code == 201

    response = upload_photo(client, item["id"])
    assert response.status_code == 400
    assert response.json() == {"error": "Maximum 3 photos per item reached"}
    assert len(client.get(f"/api/items/{item['id']}/photos").json()["data"]) == 3


def test_upload_photo_limit_follows_settings(client, monkeypatch):
    monkeypatch.setattr(settings, "MAX_PHOTOS_PER_ITEM", 1)
    item = _item(client)
    assert upload_photo(client, item["id"]).status_code == 201

    response = upload_photo(client, item["id"])
    assert response.status_code == 400
    assert response.json() == {"error": "Maximum 1 photos per item reached"}


def test_upload_photo_validation(client):
    item = _item(client)

    response = upload_photo(client, 999)
    assert response.status_code == 404
    assert response.json() == {"error": "Item not found"}

    response = client.post(
        f"/api/items/{item['id']}/photos",
        files={"document": ("notes.txt", b"hello", "text/plain")},
    )
    assert response.status_code == 400
    assert response.json() == {"error": "No photo file provided"}

    response = upload_photo(client, item["id"], content=b"GIF89a", filename="a.gif", mime_type="image/gif")
    assert response.status_code == 400
    assert response.json() == {"error": "Invalid file type: image/gif. Supported formats: JPEG, PNG, WebP"}


def test_upload_photo_size_limit_from_settings(client):
    item = _item(client)
    client.put("/api/settings", json={"settings": {"max_upload_size": str(1024 * 1024)}})

    response = upload_photo(client, item["id"], content=b"\x89PNG" + b"0" * (1024 * 1024 + 10))
    assert response.status_code == 400
    assert response.json() == {"error": "File size exceeds maximum of 1.0MB"}


def test_upload_invalid_image_leaves_no_files(client):
    item = _item(client)

    response = upload_photo(client, item["id"], content=b"definitely not an image")
    assert response.status_code == 400
    assert response.json() == {"error": "Uploaded file is not a valid image"}
    assert list(settings.upload_dir.iterdir()) == []
    assert list(settings.thumbnail_dir.iterdir()) == []
    assert client.get(f"/api/items/{item['id']}/photos").json()["data"] == []


def test_serve_photo_and_thumbnail(client):
    item = _item(client)
    content = make_image_bytes()
    photo = upload_photo(client, item["id"], content=content).json()["data"]

    response = client.get(f"/api/photos/{photo['id']}")
    assert response.status_code == 200
    assert response.content == content
    assert response.headers["content-type"] == "image/png"
    assert response.headers["cache-control"] == "public, max-age=31536000, immutable"

    response = client.get(f"/api/photos/{photo['id']}/thumbnail")
    assert response.status_code == 200
    with Image.open(io.BytesIO(response.content)) as thumb:
        assert thumb.size == (200, 200)


def test_serve_photo_missing_row_or_file(client):
    item = _item(client)
    photo = upload_photo(client, item["id"]).json()["data"]

    assert client.get("/api/photos/999").json() == {"error": "Photo not found"}

    (settings.data_dir / photo["original_path"]).unlink()
    response = client.get(f"/api/photos/{photo['id']}")
    assert response.status_code == 404
    assert response.json() == {"error": "Photo file not found"}

    (settings.data_dir / photo["thumbnail_path"]).unlink()
    response = client.get(f"/api/photos/{photo['id']}/thumbnail")
    assert response.status_code == 404
    assert response.json() == {"error": "Thumbnail not found"}


def test_list_photos_newest_first(client):
    item = _item(client)
    first = upload_photo(client, item["id"]).json()["data"]
    second = upload_photo(client, item["id"]).json()["data"]

    response = client.get(f"/api/items/{item['id']}/photos")
    assert response.status_code == 200
    assert [p["id"] for p in response.json()["data"]] == [second["id"], first["id"]]


def test_delete_photo_removes_files(client):
    item = _item(client)
    photo = upload_photo(client, item["id"]).json()["data"]

    response = client.delete(f"/api/photos/{photo['id']}")
    assert response.status_code == 200
    assert response.json() == {"message": "Photo deleted successfully"}
    assert not (settings.data_dir / photo["original_path"]).exists()
    assert not (settings.data_dir / photo["thumbnail_path"]).exists()

    response = client.delete(f"/api/photos/{photo['id']}")
    assert response.status_code == 404
    assert response.json() == {"error": "Photo not found"}
