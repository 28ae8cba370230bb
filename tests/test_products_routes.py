"""
Testes das rotas /api/products
"""


def test_list_products_empty(client):
    response = client.get("/api/products")
    assert response.status_code == 200
    assert response.json() == []


def test_post_then_get_returns_same_fields(client, margherita):
    created = client.post("/api/products", json=margherita)
    assert created.status_code == 200
    assert created.json() == margherita

    response = client.get("/api/products/PZ001")
    assert response.status_code == 200
    assert response.json() == margherita


def test_get_unknown_sku_returns_null(client):
    response = client.get("/api/products/NOPE")
    assert response.status_code == 200
    assert response.json() is None


def test_delete_then_get_returns_null(client, margherita):
    client.post("/api/products", json=margherita)

    deleted = client.delete("/api/products/PZ001")
    assert deleted.status_code == 200
    assert deleted.content == b""

    response = client.get("/api/products/PZ001")
    assert response.status_code == 200
    assert response.json() is None


def test_delete_unknown_sku_succeeds(client):
    response = client.delete("/api/products/NOPE")
    assert response.status_code == 200


def test_post_twice_keeps_latest_price(client, margherita):
    client.post("/api/products", json=margherita)
    client.post("/api/products", json={**margherita, "price": 12.5})

    response = client.get("/api/products/PZ001")
    assert response.json()["price"] == 12.5
    assert len(client.get("/api/products").json()) == 1


def test_post_without_optional_fields(client):
    response = client.post("/api/products", json={"sku": "PZ010"})
    assert response.status_code == 200
    assert response.json() == {
        "sku": "PZ010",
        "name": None,
        "price": 0.0,
        "category": None,
        "size": None,
        "ingredient": None,
        "launch": None,
    }


def test_post_without_sku_is_rejected(client, margherita):
    payload = dict(margherita)
    del payload["sku"]
    response = client.post("/api/products", json=payload)
    assert response.status_code == 422


def test_post_with_invalid_launch_is_rejected(client, margherita):
    response = client.post("/api/products", json={**margherita, "launch": "ontem"})
    assert response.status_code == 422


def test_list_products_after_creations(client, margherita):
    client.post("/api/products", json=margherita)
    client.post("/api/products", json={**margherita, "sku": "PZ002", "name": "Pepperoni"})

    names = [p["name"] for p in client.get("/api/products").json()]
    assert names == ["Margherita", "Pepperoni"]


def test_products_by_category(client, margherita):
    client.post("/api/products", json=margherita)
    client.post("/api/products", json={**margherita, "sku": "PZ002", "category": "veggie"})

    response = client.get("/api/products/category/veggie")
    assert response.status_code == 200
    assert [p["sku"] for p in response.json()] == ["PZ002"]

    assert client.get("/api/products/category/dessert").json() == []


def test_post_only_sku_replaces_previous_record(client, margherita):
    client.post("/api/products", json=margherita)
    client.post("/api/products", json={"sku": "PZ001"})

    product = client.get("/api/products/PZ001").json()
    assert product["sku"] == "PZ001"
    assert product["price"] == 0.0
    for field in ("name", "category", "size", "ingredient", "launch"):
        assert product[field] is None


def test_post_with_null_price_defaults_to_zero(client, margherita):
    response = client.post("/api/products", json={**margherita, "price": None})
    assert response.status_code == 200
    assert response.json()["price"] == 0.0
