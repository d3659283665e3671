from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from shared.config.sql import utc_day
from .models import Order

class OrderRepository:
    @staticmethod
    async def create_order(db: AsyncSession, order: Order):
        db.add(order)
        await db.commit()
        await db.refresh(order)
        return order

    @staticmethod
    async def get_order(db: AsyncSession, order_id: str):
        result = await db.execute(select(Order).where(Order.id == order_id))
        return result.scalars().first()

    @staticmethod
    async def list_orders_with_owner(db: AsyncSession):
        result = await db.execute(
            select(Order)
            .options(selectinload(Order.owner))
            .order_by(Order.created_at)
        )
        return result.scalars().all()

    @staticmethod
    async def list_orders_by_user(db: AsyncSession, user_id: int):
        result = await db.execute(
            select(Order)
            .where(Order.user_id == user_id)
            .order_by(Order.created_at)
        )
        return result.scalars().all()

    @staticmethod
    async def save(db: AsyncSession, order: Order):
        await db.commit()
        await db.refresh(order)
        return order

    @staticmethod
    async def sales_totals(db: AsyncSession):
        """Returns ``(num_orders, total_sales)`` across every order."""
        result = await db.execute(
            select(
                func.count(Order.id),
                func.coalesce(func.sum(Order.total_price), 0.0),
            )
        )
        return result.one()

    @staticmethod
    async def daily_sales(db: AsyncSession):
        """Order count and sales per UTC day of creation, oldest day first."""
        order_day = utc_day(Order.created_at).label("order_day")
        result = await db.execute(
            select(
                order_day,
                func.count(Order.id).label("orders"),
                func.sum(Order.total_price).label("sales"),
            )
            .group_by(order_day)
            .order_by(order_day)
        )
        return result.all()
