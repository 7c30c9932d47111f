from conftest import create_item, create_tote


def _seed(client):
    garage = create_tote(client, name="Tools", location="Garage", owner="Sam")
    attic = create_tote(client, name="Holiday", location="Attic", owner="Alex")
    hammer = create_item(client, garage["id"], name="Hammer", description="Claw hammer")
    drill = create_item(client, garage["id"], name="Drill")
    lights = create_item(client, attic["id"], name="Lights", description="String lights")
    client.post(f"/api/items/{drill['id']}/metadata", json={"key": "Brand", "value": "Makita"})
    client.post(f"/api/items/{lights['id']}/metadata", json={"key": "Color", "value": "Warm white"})
    return garage, attic, hammer, drill, lights


def test_search_blank_returns_empty(client):
    _seed(client)
    response = client.get("/api/search", params={"q": "  "})
    assert response.status_code == 200
    assert response.json() == {"data": {"items": [], "total": 0}}


def test_search_matches_name_description_and_metadata_value(client):
    _, _, hammer, drill, lights = _seed(client)

    result = client.get("/api/search", params={"q": "hammer"}).json()["data"]
    assert [i["id"] for i in result["items"]] == [hammer["id"]]
    assert result["items"][0]["tote_name"] == "Tools"
    assert result["items"][0]["tote_location"] == "Garage"

    result = client.get("/api/search", params={"q": "string"}).json()["data"]
    assert [i["id"] for i in result["items"]] == [lights["id"]]

    result = client.get("/api/search", params={"q": "makita"}).json()["data"]
    assert [i["id"] for i in result["items"]] == [drill["id"]]
    assert result["total"] == 1


def test_search_filters_by_tote_and_metadata_key(client):
    _, _, hammer, drill, lights = _seed(client)

    result = client.get("/api/search", params={"location": "gar"}).json()["data"]
    assert sorted(i["id"] for i in result["items"]) == sorted([hammer["id"], drill["id"]])

    result = client.get("/api/search", params={"owner": "alex"}).json()["data"]
    assert [i["id"] for i in result["items"]] == [lights["id"]]

    result = client.get("/api/search", params={"metadata_key": "brand"}).json()["data"]
    assert [i["id"] for i in result["items"]] == [drill["id"]]

    result = client.get("/api/search", params={"q": "lights", "location": "Garage"}).json()["data"]
    assert result == {"items": [], "total": 0}


def test_search_orders_by_updated_at(client):
    _, _, hammer, drill, _ = _seed(client)
    result = client.get("/api/search", params={"location": "Garage"}).json()["data"]
    assert [i["id"] for i in result["items"]] == [drill["id"], hammer["id"]]


def test_search_filters_lists(client):
    _seed(client)
    create_tote(client, name="Misc", location="Garage", owner="  ")

    response = client.get("/api/search/filters")
    assert response.status_code == 200
    assert response.json()["data"] == {
        "locations": ["Attic", "Garage"],
        "owners": ["Alex", "Sam"],
        "metadataKeys": ["Brand", "Color"],
    }
