"""
Shared fixtures for the storefront test suite.

The environment is configured before any application module is imported:
settings, the JWT handler and the engine all read it at import time.
"""
import asyncio
import os
import tempfile
from datetime import datetime, timezone

import pytest

_DB_DIR = tempfile.mkdtemp(prefix="storefront-tests-")

os.environ.update({
    "DATABASE_URL": f"sqlite+aiosqlite:///{_DB_DIR}/test.db",
    "JWT_SECRET_KEY": "test-secret-key",
    "RATE_LIMIT_ENABLED": "false",
    "TRACING_ENABLED": "false",
    "LOG_LEVEL": "WARNING",
})

from fastapi.testclient import TestClient  # noqa: E402

from main import app  # noqa: E402
from services.auth_service.models import User  # noqa: E402
from services.order_service.models import Order  # noqa: E402
from services.product_service.models import Product  # noqa: E402
from shared.config.database import AsyncSessionLocal, Base, engine  # noqa: E402
from shared.security.jwt_handler import create_user_token  # noqa: E402


async def _reset_database():
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)


async def _add_all(*rows):
    async with AsyncSessionLocal() as session:
        session.add_all(rows)
        await session.commit()
        for row in rows:
            await session.refresh(row)
    return rows


def add_rows(*rows):
    """Persists ORM rows outside the app and returns them refreshed."""
    return asyncio.run(_add_all(*rows))


def auth_header(user) -> dict:
    return {"Authorization": f"Bearer {create_user_token(user)}"}


@pytest.fixture
def client():
    asyncio.run(_reset_database())
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def make_user(client):
    counter = {"n": 0}

    def _make(name="Shopper", is_admin=False):
        counter["n"] += 1
        user = User(
            name=name,
            email=f"user{counter['n']}@example.com",
            hashed_password="not-a-real-hash",
            is_admin=is_admin,
        )
        (user,) = add_rows(user)
        return user

    return _make


@pytest.fixture
def shopper(make_user):
    return make_user("Alice")


@pytest.fixture
def admin(make_user):
    return make_user("Root", is_admin=True)


@pytest.fixture
def make_order(client):
    """Inserts an order directly, for tests that need control over timestamps."""

    def _make(user, total_price=25.0, created_at=None, **fields):
        order = Order(
            order_items=[
                {"product": 1, "name": "Shirt", "slug": "shirt", "quantity": 1,
                 "image": None, "price": total_price}
            ],
            shipping_address={
                "full_name": user.name, "address": "1 Main St", "city": "Springfield",
                "postal_code": "12345", "country": "US",
            },
            payment_method="PayPal",
            items_price=total_price,
            shipping_price=0.0,
            tax_price=0.0,
            total_price=total_price,
            user_id=user.id,
            created_at=created_at or datetime.now(timezone.utc),
            **fields,
        )
        (order,) = add_rows(order)
        return order

    return _make


@pytest.fixture
def make_product(client):
    def _make(slug, category, price=10.0):
        product = Product(
            name=slug.title(), slug=slug, category=category, price=price, count_in_stock=5
        )
        (product,) = add_rows(product)
        return product

    return _make


@pytest.fixture
def order_payload():
    return {
        "orderItems": [
            {"_id": 7, "name": "Shirt", "slug": "shirt", "quantity": 2,
             "image": "/images/shirt.jpg", "price": 10}
        ],
        "shippingAddress": {
            "fullName": "Alice Doe",
            "address": "1 Main St",
            "city": "Springfield",
            "postalCode": "12345",
            "country": "US",
        },
        "paymentMethod": "PayPal",
        "itemsPrice": 20,
        "shippingPrice": 0,
        "taxPrice": 5,
        "totalPrice": 25,
    }
