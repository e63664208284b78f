"""Tests for the product catalog endpoints."""

from collections.abc import Callable

from fastapi.testclient import TestClient


def test_create_then_list_contains_new_row(client: TestClient) -> None:
    resp = client.post("/api/products", json={"name": "Biscuits", "price": 50, "quantity": 12})
    assert resp.status_code == 200
    new_id = resp.json()["id"]

    rows = client.get("/api/products").json()
    matching = [r for r in rows if r["id"] == new_id]
    assert matching == [{"id": new_id, "name": "Biscuits", "price": 50, "quantity": 12}]


def test_list_is_empty_on_fresh_store(client: TestClient) -> None:
    resp = client.get("/api/products")
    assert resp.status_code == 200
    assert resp.json() == []


def test_search_filters_by_name_substring(client: TestClient, make_product: Callable[..., int]) -> None:
    cola_id = make_product("Coca Cola")
    make_product("Pepsi")
    make_product("Orange Juice")

    rows = client.get("/api/products", params={"search": "cola"}).json()
    assert [r["id"] for r in rows] == [cola_id]


def test_search_without_match_returns_empty(client: TestClient, make_product: Callable[..., int]) -> None:
    make_product("Bread")
    assert client.get("/api/products", params={"search": "milk"}).json() == []


def test_update_replaces_all_fields(client: TestClient, make_product: Callable[..., int]) -> None:
    product_id = make_product("Sugar", 80, 20)

    resp = client.put(f"/api/products/{product_id}", json={"name": "Brown Sugar", "price": 95, "quantity": 7})
    assert resp.status_code == 200
    assert resp.json() == {"updated": 1}

    row = client.get("/api/products").json()[0]
    assert row == {"id": product_id, "name": "Brown Sugar", "price": 95, "quantity": 7}


def test_update_unknown_id_reports_zero_rows(client: TestClient) -> None:
    resp = client.put("/api/products/999", json={"name": "Ghost", "price": 1, "quantity": 1})
    assert resp.status_code == 200
    assert resp.json() == {"updated": 0}


def test_delete_removes_product(client: TestClient, make_product: Callable[..., int]) -> None:
    keep_id = make_product("Salt")
    drop_id = make_product("Pepper")

    resp = client.delete(f"/api/products/{drop_id}")
    assert resp.status_code == 200
    assert resp.json() == {"deleted": 1}
    assert [r["id"] for r in client.get("/api/products").json()] == [keep_id]


def test_delete_unknown_id_reports_zero_rows(client: TestClient) -> None:
    resp = client.delete("/api/products/424242")
    assert resp.status_code == 200
    assert resp.json() == {"deleted": 0}


def test_low_stock_uses_inclusive_threshold(client: TestClient, make_product: Callable[..., int]) -> None:
    at_threshold = make_product("Rice", quantity=5)
    below = make_product("Flour", quantity=0)
    make_product("Oil", quantity=6)

    rows = client.get("/api/low-stock").json()
    assert {r["id"] for r in rows} == {at_threshold, below}


def test_create_rejects_missing_fields(client: TestClient) -> None:
    resp = client.post("/api/products", json={"name": "No price"})
    assert resp.status_code == 400
    body = resp.json()
    assert "price" in body["error"]
    assert "quantity" in body["error"]


def test_create_rejects_negative_values(client: TestClient) -> None:
    resp = client.post("/api/products", json={"name": "Bad", "price": -1, "quantity": 3})
    assert resp.status_code == 400
    assert "price" in resp.json()["error"]


def test_create_rejects_empty_name(client: TestClient) -> None:
    resp = client.post("/api/products", json={"name": "", "price": 1, "quantity": 1})
    assert resp.status_code == 400


def test_update_rejects_negative_values(client: TestClient, make_product: Callable[..., int]) -> None:
    product_id = make_product("Ghee", 400, 8)

    resp = client.put(f"/api/products/{product_id}", json={"name": "Ghee", "price": -5, "quantity": -1})
    assert resp.status_code == 400
    assert "price" in resp.json()["error"]
    assert "quantity" in resp.json()["error"]

    row = client.get("/api/products").json()[0]
    assert row == {"id": product_id, "name": "Ghee", "price": 400, "quantity": 8}


def test_update_rejects_missing_fields(client: TestClient, make_product: Callable[..., int]) -> None:
    product_id = make_product("Honey", 250, 6)

    resp = client.put(f"/api/products/{product_id}", json={"name": ""})
    assert resp.status_code == 400
    body = resp.json()
    assert "name" in body["error"]
    assert "price" in body["error"]

    row = client.get("/api/products").json()[0]
    assert row == {"id": product_id, "name": "Honey", "price": 250, "quantity": 6}


def test_create_rejects_values_beyond_integer_column(client: TestClient) -> None:
    resp = client.post("/api/products", json={"name": "Gold bar", "price": 2**63, "quantity": 1})
    assert resp.status_code == 400
    assert resp.headers["content-type"] == "application/json"
    assert "price" in resp.json()["error"]
    assert client.get("/api/products").json() == []


def test_path_id_beyond_integer_column_is_400(client: TestClient) -> None:
    resp = client.delete(f"/api/products/{2**63}")
    assert resp.status_code == 400
    assert "product_id" in resp.json()["error"]


def test_search_treats_wildcards_literally(client: TestClient, make_product: Callable[..., int]) -> None:
    percent = make_product("100% Juice")
    make_product("1000 Juice")
    underscore = make_product("snack_box")
    make_product("snackXbox")

    assert [r["id"] for r in client.get("/api/products", params={"search": "100%"}).json()] == [percent]
    assert [r["id"] for r in client.get("/api/products", params={"search": "k_b"}).json()] == [underscore]
