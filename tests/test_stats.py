from onetouch.modules.stats.schemas import StatsResponse


def test_stats_on_empty_database_are_zero(client):
    resp = client.get("/api/stats")
    assert resp.status_code == 200
    assert resp.json() == {
        "totalproducts": 0,
        "totalvalue": 0,
        "lowstock": 0,
        "totalsales": 0,
        "totalrevenue": 0,
        "totalprofit": 0,
        "todaysales": 0,
    }


def test_stats_aggregate_products_and_sales(client, make_product):
    shirt = make_product(name="Shirt", quantity=10, price=100, cost=60)
    make_product(name="Cap", quantity=3, price=20, cost=5, minStock=5)   # low stock
    make_product(name="Socks", quantity=0, price=4, cost=1)              # empty, not low

    client.post("/api/sales", json={"productId": shirt["id"], "quantity": 3})
    client.post("/api/sales", json={"productId": shirt["id"], "quantity": 1})

    stats = client.get("/api/stats").json()
    assert stats["totalproducts"] == 3
    # shirts 6 x 100 + caps 3 x 20
    assert stats["totalvalue"] == 660
    assert stats["lowstock"] == 1
    assert stats["totalsales"] == 2
    assert stats["totalrevenue"] == 400
    assert stats["totalprofit"] == 160
    assert stats["todaysales"] == 2


def test_stats_response_keeps_python_names_internally():
    stats = StatsResponse(total_products=2, today_sales=1)
    assert stats.total_products == 2
    assert stats.model_dump(by_alias=True)["todaysales"] == 1
