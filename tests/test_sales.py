from decimal import Decimal

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError

from onetouch.modules.sales.repository import SalesRepository
from onetouch.modules.sales.service import calculate_sale_amounts
from onetouch.shared.database.models import Sale


def test_sale_computes_total_profit_and_decrements_stock(client, make_product):
    product = make_product(quantity=10, price=100.00, cost=60.00)

    resp = client.post("/api/sales", json={"productId": product["id"], "quantity": 3})
    assert resp.status_code == 201
    sale = resp.json()
    assert sale["product_id"] == product["id"]
    assert sale["quantity"] == 3
    assert sale["total"] == 300.00
    assert sale["profit"] == 120.00
    assert sale["customer"] == "General Customer"
    assert sale["payment"] == "Cash"
    assert sale["notes"] == ""
    assert sale["sale_date"]

    assert client.get(f"/api/products/{product['id']}").json()["quantity"] == 7


def test_sale_copies_product_data_at_sale_time(client, make_product):
    product = make_product(name="Lamp", category="Home", price=20, cost=5)
    sale = client.post("/api/sales", json={
        "productId": product["id"],
        "quantity": 1,
        "customer": "Ana",
        "payment": "Card",
        "notes": "gift",
    }).json()

    client.put(f"/api/products/{product['id']}", json={
        "name": "Desk Lamp",
        "category": "Office",
        "quantity": 9,
        "price": 25,
        "cost": 6,
    })

    sales = client.get("/api/sales").json()
    assert len(sales) == 1
    assert sales[0]["id"] == sale["id"]
    assert sales[0]["product_name"] == "Lamp"
    assert sales[0]["category"] == "Home"
    assert sales[0]["price"] == 20
    assert sales[0]["cost"] == 5
    assert sales[0]["customer"] == "Ana"
    assert sales[0]["payment"] == "Card"
    assert sales[0]["notes"] == "gift"


def test_insufficient_stock_is_rejected_without_changes(client, db_session, make_product):
    product = make_product(quantity=7)

    resp = client.post("/api/sales", json={"productId": product["id"], "quantity": 999})
    assert resp.status_code == 400
    assert resp.json() == {"error": "Insufficient stock", "available": 7, "requested": 999}

    assert client.get(f"/api/products/{product['id']}").json()["quantity"] == 7
    assert db_session.query(func.count(Sale.id)).scalar() == 0


def test_selling_the_whole_stock_leaves_zero(client, make_product):
    product = make_product(quantity=2)
    assert client.post("/api/sales", json={"productId": product["id"], "quantity": 2}).status_code == 201

    assert client.get(f"/api/products/{product['id']}").json()["quantity"] == 0
    resp = client.post("/api/sales", json={"productId": product["id"], "quantity": 1})
    assert resp.status_code == 400
    assert resp.json()["available"] == 0


def test_sale_for_missing_product_returns_404(client):
    resp = client.post("/api/sales", json={"productId": 999, "quantity": 1})
    assert resp.status_code == 404
    assert resp.json() == {"error": "Product not found"}


def test_sale_quantity_must_be_positive(client, make_product):
    product = make_product()
    resp = client.post("/api/sales", json={"productId": product["id"], "quantity": 0})
    assert resp.status_code == 422
    assert client.get(f"/api/products/{product['id']}").json()["quantity"] == 10


def test_failure_after_sale_insert_rolls_back_everything(client, db_session, make_product, monkeypatch):
    product = make_product(quantity=10)

    def broken_decrease(self, product_id, quantity):
        raise SQLAlchemyError("connection lost")

    monkeypatch.setattr(SalesRepository, "decrease_product_stock", broken_decrease)

    resp = client.post("/api/sales", json={"productId": product["id"], "quantity": 3})
    assert resp.status_code == 500
    assert resp.json() == {"error": "Error recording sale"}

    assert db_session.query(func.count(Sale.id)).scalar() == 0
    assert client.get(f"/api/products/{product['id']}").json()["quantity"] == 10


def test_stock_never_negative_after_mixed_operations(client, make_product):
    product = make_product(quantity=3)
    pid = product["id"]
    operations = [
        ("sale", 2), ("sale", 2), ("add", 4), ("sale", 5), ("sale", 1), ("add", 1), ("sale", 3),
    ]
    for kind, qty in operations:
        if kind == "sale":
            client.post("/api/sales", json={"productId": pid, "quantity": qty})
        else:
            client.post("/api/stock/add", json={"productId": pid, "quantity": qty})
        assert client.get(f"/api/products/{pid}").json()["quantity"] >= 0

    # 3 -2 +4 -5 +1, the three oversized sales were rejected
    assert client.get(f"/api/products/{pid}").json()["quantity"] == 1


def test_list_sales_newest_first(client, make_product):
    product = make_product()
    first = client.post("/api/sales", json={"productId": product["id"], "quantity": 1}).json()
    second = client.post("/api/sales", json={"productId": product["id"], "quantity": 1}).json()

    ids = [s["id"] for s in client.get("/api/sales").json()]
    assert ids == [second["id"], first["id"]]


def test_calculate_sale_amounts_uses_two_decimals():
    total, profit = calculate_sale_amounts(Decimal("19.99"), Decimal("12.50"), 3)
    assert total == Decimal("59.97")
    assert profit == Decimal("22.47")
