from datetime import datetime, timezone
from typing import Optional

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from services.auth_service.repository import UserRepository
from services.product_service.repository import ProductRepository
from shared.observability.metrics import (
    ecomm_order_value,
    ecomm_orders_created_total,
    ecomm_orders_paid_total,
    ecomm_summary_requests_total,
)
from shared.security.dependencies import AuthenticatedUser

from .models import Order
from .repository import OrderRepository
from .schemas import (
    CategoryCount,
    DailySales,
    OrderCreate,
    PaymentResultIn,
    SalesSummary,
    SalesTotals,
    UserTotals,
)

logger = structlog.get_logger(__name__)


def _is_foreign(order: Order, caller: AuthenticatedUser) -> bool:
    return not caller.is_admin and order.user_id != caller.user_id


class OrderService:
    @staticmethod
    async def list_orders(db: AsyncSession):
        return await OrderRepository.list_orders_with_owner(db)

    @staticmethod
    async def create_order(db: AsyncSession, data: OrderCreate, caller: AuthenticatedUser):
        order = Order(
            order_items=[item.to_document() for item in data.order_items],
            shipping_address=data.shipping_address.model_dump(),
            payment_method=data.payment_method,
            items_price=data.items_price,
            shipping_price=data.shipping_price,
            tax_price=data.tax_price,
            total_price=data.total_price,
            user_id=caller.user_id,
        )
        order = await OrderRepository.create_order(db, order)

        ecomm_orders_created_total.inc()
        ecomm_order_value.observe(order.total_price)
        logger.info(
            "order_created",
            order_id=order.id,
            user_id=caller.user_id,
            items=len(order.order_items),
            total_price=order.total_price,
        )
        return order

    @staticmethod
    async def list_user_orders(db: AsyncSession, user_id: int):
        return await OrderRepository.list_orders_by_user(db, user_id)

    @staticmethod
    async def get_order(db: AsyncSession, order_id: str, caller: AuthenticatedUser):
        order = await OrderRepository.get_order(db, order_id)
        if order is not None and _is_foreign(order, caller):
            # Access is not restricted to the owner; record it so it can be audited
            logger.warning(
                "order_read_by_non_owner",
                order_id=order.id,
                owner_id=order.user_id,
                user_id=caller.user_id,
            )
        return order

    @staticmethod
    async def pay_order(
        db: AsyncSession,
        order_id: str,
        payment: PaymentResultIn,
        caller: AuthenticatedUser,
    ) -> Optional[Order]:
        """
        Marks the order paid and stores the payer details as reported.

        Nothing is verified against the payment provider. Repeated calls keep
        the order paid and overwrite ``paid_at`` and the payment result.
        Returns None when the order does not exist.
        """
        order = await OrderRepository.get_order(db, order_id)
        if order is None:
            logger.info("order_pay_missing", order_id=order_id, user_id=caller.user_id)
            return None

        if _is_foreign(order, caller):
            logger.warning(
                "order_paid_by_non_owner",
                order_id=order.id,
                owner_id=order.user_id,
                user_id=caller.user_id,
            )

        order.is_paid = True
        order.paid_at = datetime.now(timezone.utc)
        order.payment_result = payment.model_dump()
        order = await OrderRepository.save(db, order)

        ecomm_orders_paid_total.inc()
        logger.info(
            "order_paid",
            order_id=order.id,
            payment_id=payment.id,
            payment_status=payment.status,
        )
        return order

    @staticmethod
    async def summarize(db: AsyncSession) -> SalesSummary:
        num_orders, total_sales = await OrderRepository.sales_totals(db)
        num_users = await UserRepository.count_users(db)
        daily = await OrderRepository.daily_sales(db)
        categories = await ProductRepository.count_by_category(db)

        ecomm_summary_requests_total.inc()

        # Grouping an empty collection yields no row at all, not a zero row
        return SalesSummary(
            orders=[SalesTotals(num_orders=num_orders, total_sales=total_sales)]
            if num_orders
            else [],
            users=[UserTotals(num_users=num_users)] if num_users else [],
            daily_orders=[
                DailySales(day=day, orders=orders, sales=sales)
                for day, orders, sales in daily
            ],
            product_categories=[
                CategoryCount(category=category, count=count)
                for category, count in categories
            ],
        )
