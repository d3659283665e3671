from typing import List

from fastapi import APIRouter, Depends, HTTPException, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from shared.config.database import get_db
from shared.config.settings import ORDER_WRITE_RATE_LIMIT
from shared.security import limiter
from shared.security.dependencies import AuthenticatedUser, require_admin, require_user

from .schemas import (
    OrderCreate,
    OrderMessageResponse,
    OrderResponse,
    OrderWithOwnerResponse,
    PaymentResultIn,
    SalesSummary,
)
from .service import OrderService

# Every order route needs a signed-in caller; admin routes add require_admin
router = APIRouter(tags=["Orders"], dependencies=[Depends(require_user)])
public_router = APIRouter()

@public_router.get("/health", include_in_schema=False)
async def health_check():
    return {"service": "order", "status": "running"}


@router.get(
    "/",
    response_model=List[OrderWithOwnerResponse],
    dependencies=[Depends(require_admin)],
)
async def list_orders(db: AsyncSession = Depends(get_db)):
    return await OrderService.list_orders(db)


@router.post(
    "/",
    response_model=OrderMessageResponse,
    status_code=status.HTTP_201_CREATED,
)
@limiter.limit(ORDER_WRITE_RATE_LIMIT)
async def create_order(
    request: Request,
    payload: OrderCreate,
    caller: AuthenticatedUser = Depends(require_user),
    db: AsyncSession = Depends(get_db),
):
    order = await OrderService.create_order(db, payload, caller)
    return OrderMessageResponse(
        message="New Order Created", order=OrderResponse.model_validate(order)
    )


@router.get("/mine", response_model=List[OrderResponse])
async def list_my_orders(
    caller: AuthenticatedUser = Depends(require_user),
    db: AsyncSession = Depends(get_db),
):
    return await OrderService.list_user_orders(db, caller.user_id)


@router.get(
    "/summary",
    response_model=SalesSummary,
    dependencies=[Depends(require_admin)],
)
async def sales_summary(db: AsyncSession = Depends(get_db)):
    return await OrderService.summarize(db)


@router.get("/{order_id}", response_model=OrderResponse)
async def get_order(
    order_id: str,
    caller: AuthenticatedUser = Depends(require_user),
    db: AsyncSession = Depends(get_db),
):
    order = await OrderService.get_order(db, order_id, caller)
    if not order:
        raise HTTPException(status_code=404, detail="Order not found.")
    return order


@router.put("/{order_id}/pay", response_model=OrderMessageResponse)
@limiter.limit(ORDER_WRITE_RATE_LIMIT)
async def pay_order(
    request: Request,
    order_id: str,
    payment: PaymentResultIn,
    caller: AuthenticatedUser = Depends(require_user),
    db: AsyncSession = Depends(get_db),
):
    order = await OrderService.pay_order(db, order_id, payment, caller)
    if not order:
        raise HTTPException(status_code=404, detail="Order Not Found")
    return OrderMessageResponse(
        message="Order Paid", order=OrderResponse.model_validate(order)
    )
