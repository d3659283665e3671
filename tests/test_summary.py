from datetime import datetime, timezone

from conftest import auth_header


def _utc(*args):
    return datetime(*args, tzinfo=timezone.utc)


def test_summary_groups_sales_per_day_in_ascending_order(client, shopper, admin, make_order):
    # Inserted out of order to prove the sort comes from the query
    make_order(shopper, total_price=50.0, created_at=_utc(2024, 1, 2, 9, 30))
    make_order(shopper, total_price=60.0, created_at=_utc(2024, 1, 1, 8, 0))
    make_order(shopper, total_price=40.0, created_at=_utc(2024, 1, 1, 23, 59))

    response = client.get("/api/orders/summary", headers=auth_header(admin))

    assert response.status_code == 200
    summary = response.json()
    assert summary["dailyOrders"] == [
        {"_id": "2024-01-01", "orders": 2, "sales": 100.0},
        {"_id": "2024-01-02", "orders": 1, "sales": 50.0},
    ]
    assert summary["orders"] == [{"_id": None, "numOrders": 3, "totalSales": 150.0}]


def test_summary_counts_users_and_product_categories(
    client, shopper, admin, make_order, make_product
):
    make_order(shopper)
    make_product("shirt", "Shirts")
    make_product("polo", "Shirts")
    make_product("jeans", "Pants")

    summary = client.get("/api/orders/summary", headers=auth_header(admin)).json()

    assert summary["users"] == [{"_id": None, "numUsers": 2}]
    assert sorted(summary["productCategories"], key=lambda row: row["_id"]) == [
        {"_id": "Pants", "count": 1},
        {"_id": "Shirts", "count": 2},
    ]


def test_summary_on_empty_store_has_no_order_rows(client, admin):
    summary = client.get("/api/orders/summary", headers=auth_header(admin)).json()

    assert summary["orders"] == []
    assert summary["dailyOrders"] == []
    assert summary["productCategories"] == []
    # The admin calling is the only user
    assert summary["users"] == [{"_id": None, "numUsers": 1}]


def test_summary_requires_admin(client, shopper):
    response = client.get("/api/orders/summary", headers=auth_header(shopper))

    assert response.status_code == 401
    assert response.json() == {"message": "Invalid Admin Token"}
