import io

import pytest
from fastapi.testclient import TestClient
from PIL import Image

from app.core.core_config import settings
from main import app


@pytest.fixture
def client(tmp_path, monkeypatch):
    # 每個測試使用獨立的資料目錄（SQLite 檔案與照片都在這裡）
    monkeypatch.setattr(settings, "DATA_DIR", str(tmp_path / "data"))
    with TestClient(app) as test_client:
        yield test_client


def create_tote(client, name="Tools", location="Garage", **fields):
    response = client.post("/api/totes", json={"name": name, "location": location, **fields})
    assert response.status_code == 201
    return response.json()["data"]


def create_item(client, tote_id, name="Hammer", **fields):
    response = client.post(f"/api/totes/{tote_id}/items", json={"name": name, **fields})
    assert response.status_code == 201
    return response.json()["data"]


def make_image_bytes(image_format="PNG", size=(320, 240), color=(200, 40, 40)):
    buf = io.BytesIO()
    Image.new("RGB", size, color).save(buf, format=image_format)
    return buf.getvalue()


def upload_photo(client, item_id, content=None, filename="photo.png", mime_type="image/png"):
    if content is None:
        content = make_image_bytes()
    return client.post(
        f"/api/items/{item_id}/photos",
        files={"photo": (filename, content, mime_type)},
    )
