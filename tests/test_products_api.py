"""Tests for the /products endpoints."""

import uuid


def create_shop(client, name="TechStore", location="123 Main Street"):
    response = client.post("/shops", json={"name": name, "location": location})
    assert response.status_code == 201
    return response.json()


def create_product(client, shop_id, **body):
    payload = {"shop_id": shop_id, "name": "Laptop", "price": 1200, "category": "Electronics"}
    payload.update(body)
    response = client.post("/products", json=payload)
    assert response.status_code == 201
    return response.json()


def test_create_product(client, product_payload):
    shop = create_shop(client)

    response = client.post("/products", json={**product_payload, "shop_id": shop["shop_id"]})

    assert response.status_code == 201
    data = response.json()
    assert uuid.UUID(data["product_id"])
    assert data["shop_id"] == shop["shop_id"]
    assert data["name"] == "Laptop"
    assert data["description"] == "High-performance laptop"
    assert data["price"] == 1200
    assert data["category"] == "Electronics"


def test_create_product_without_description(client):
    shop = create_shop(client)

    data = create_product(client, shop["shop_id"])

    assert data["description"] is None


def test_create_product_for_unknown_shop(client, product_payload):
    response = client.post("/products", json={**product_payload, "shop_id": str(uuid.uuid4())})

    assert response.status_code == 400
    assert response.json() == {"errors": [{"param": "shop_id", "msg": "Shop not found"}]}
    assert client.get("/products").json() == []


def test_create_product_validation_errors(client):
    response = client.post("/products", json={"shop_id": "SHOP001", "price": -1})

    assert response.status_code == 400
    params = [error["param"] for error in response.json()["errors"]]
    assert params == ["shop_id", "name", "price", "category"]


def test_price_zero_is_allowed_and_negative_is_not(client):
    shop = create_shop(client)

    assert create_product(client, shop["shop_id"], price=0)["price"] == 0

    response = client.post("/products", json={
        "shop_id": shop["shop_id"], "name": "Debt", "price": -1, "category": "Misc",
    })
    assert response.status_code == 400
    assert response.json()["errors"][0]["param"] == "price"
    assert "price" in response.json()["errors"][0]["msg"]


def test_list_and_get_products(client):
    shop = create_shop(client)
    laptop = create_product(client, shop["shop_id"])
    create_product(client, shop["shop_id"], name="Smartphone", price=800)

    listed = client.get("/products")
    assert listed.status_code == 200
    assert sorted(p["name"] for p in listed.json()) == ["Laptop", "Smartphone"]

    response = client.get(f"/products/{laptop['product_id']}")
    assert response.status_code == 200
    assert response.json() == laptop


def test_get_unknown_product(client):
    response = client.get(f"/products/{uuid.uuid4()}")

    assert response.status_code == 404
    assert response.json() == {"message": "Product not found"}


def test_partial_update_keeps_omitted_fields(client):
    shop = create_shop(client)
    product = create_product(client, shop["shop_id"], description="High-performance laptop")

    response = client.put(f"/products/{product['product_id']}", json={"price": 1099.5})

    assert response.status_code == 200
    data = response.json()
    assert data["price"] == 1099.5
    assert data["name"] == "Laptop"
    assert data["description"] == "High-performance laptop"
    assert data["category"] == "Electronics"
    assert data["shop_id"] == shop["shop_id"]


def test_update_product_to_unknown_shop(client):
    shop = create_shop(client)
    product = create_product(client, shop["shop_id"])

    response = client.put(f"/products/{product['product_id']}", json={"shop_id": str(uuid.uuid4())})

    assert response.status_code == 400
    assert response.json() == {"errors": [{"param": "shop_id", "msg": "Shop not found"}]}
    assert client.get(f"/products/{product['product_id']}").json()["shop_id"] == shop["shop_id"]


def test_update_product_invalid(client):
    shop = create_shop(client)
    product = create_product(client, shop["shop_id"])

    response = client.put(f"/products/{product['product_id']}", json={"price": -1, "category": ""})

    assert response.status_code == 400
    assert [e["param"] for e in response.json()["errors"]] == ["price", "category"]


def test_update_unknown_product(client):
    response = client.put(f"/products/{uuid.uuid4()}", json={"name": "Ghost"})

    assert response.status_code == 404
    assert response.json() == {"message": "Product not found"}


def test_delete_product(client):
    shop = create_shop(client)
    product = create_product(client, shop["shop_id"])

    response = client.delete(f"/products/{product['product_id']}")

    assert response.status_code == 204
    assert client.get(f"/products/{product['product_id']}").status_code == 404
    assert client.delete(f"/products/{product['product_id']}").status_code == 404
    assert client.get(f"/shops/{shop['shop_id']}").status_code == 200


def test_shop_delete_cascades_to_its_products_only(client):
    techstore = create_shop(client)
    bookhaven = create_shop(client, name="BookHaven", location="456 Oak Avenue")
    for name in ("Laptop", "Smartphone"):
        create_product(client, techstore["shop_id"], name=name)
    novel = create_product(client, bookhaven["shop_id"], name="The Lord of the Rings", price=25, category="Books")

    assert client.delete(f"/shops/{techstore['shop_id']}").status_code == 204

    remaining = client.get("/products").json()
    assert [p["product_id"] for p in remaining] == [novel["product_id"]]


def test_techstore_scenario(client):
    response = client.post("/shops", json={"name": "TechStore", "location": "123 Main Street"})
    assert response.status_code == 201
    shop_id = response.json()["shop_id"]

    response = client.post("/products", json={
        "shop_id": shop_id, "name": "Laptop", "price": 1200, "category": "Electronics",
    })
    assert response.status_code == 201
    laptop_id = response.json()["product_id"]

    assert client.delete(f"/shops/{shop_id}").status_code == 204

    response = client.get(f"/products/{laptop_id}")
    assert response.status_code == 404
    assert response.json() == {"message": "Product not found"}


def test_price_precision_and_range(client):
    shop = create_shop(client)
    base = {"shop_id": shop["shop_id"], "name": "Widget", "category": "Misc"}

    for price, message in ((1.999, "price must have at most 2 decimal places"),
                           (10**13, "price must be less than 10000000000000")):
        response = client.post("/products", json={**base, "price": price})
        assert response.status_code == 400
        assert response.json() == {"errors": [{"param": "price", "msg": message}]}
    assert client.get("/products").json() == []

    product = create_product(client, shop["shop_id"], price=19.99)
    assert client.get(f"/products/{product['product_id']}").json()["price"] == 19.99

    response = client.put(f"/products/{product['product_id']}", json={"price": 1.999})
    assert response.status_code == 400
    assert client.get(f"/products/{product['product_id']}").json()["price"] == 19.99
