from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


class ShippingAddress(BaseModel):
    full_name: str = Field(min_length=1)
    address: str = Field(min_length=1)
    city: str = Field(min_length=1)
    postal_code: str = Field(min_length=1)
    country: str = Field(min_length=1)

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class OrderItemIn(BaseModel):
    """A cart line as submitted by the storefront; ``_id`` is the product id."""
    id: int = Field(alias="_id")
    name: str = Field(min_length=1)
    slug: Optional[str] = None
    quantity: int = Field(ge=1)
    image: Optional[str] = None
    price: float = Field(ge=0)

    class Config:
        populate_by_name = True

    def to_document(self) -> dict:
        # Item snapshot stored on the order, keyed to the product it came from
        return {
            "product": self.id,
            "name": self.name,
            "slug": self.slug,
            "quantity": self.quantity,
            "image": self.image,
            "price": self.price,
        }


class OrderCreate(BaseModel):
    # Prices are trusted as sent; totals are not recomputed here
    order_items: List[OrderItemIn] = Field(min_length=1)
    shipping_address: ShippingAddress
    payment_method: str = Field(min_length=1)
    items_price: float = Field(ge=0)
    shipping_price: float = Field(ge=0)
    tax_price: float = Field(ge=0)
    total_price: float = Field(ge=0)

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class PaymentResultIn(BaseModel):
    """Payer details as reported by the payment widget (snake_case keys)."""
    id: str
    status: str
    update_time: str
    email_address: str


class OrderItem(BaseModel):
    product: int
    name: str
    slug: Optional[str] = None
    quantity: int
    image: Optional[str] = None
    price: float


class PaymentResult(BaseModel):
    id: Optional[str] = None
    status: Optional[str] = None
    update_time: Optional[str] = None
    email_address: Optional[str] = None


class OrderOwner(BaseModel):
    id: int
    name: str

    class Config:
        from_attributes = True


class _OrderFields(BaseModel):
    id: str
    order_items: List[OrderItem]
    shipping_address: ShippingAddress
    payment_method: str
    items_price: float
    shipping_price: float
    tax_price: float
    total_price: float
    is_paid: bool
    paid_at: Optional[datetime] = None
    payment_result: Optional[PaymentResult] = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
        alias_generator = to_camel
        populate_by_name = True


class OrderResponse(_OrderFields):
    user_id: int = Field(alias="user")


class OrderWithOwnerResponse(_OrderFields):
    """Admin listing shape: ``user`` is expanded to the owner's id and name."""
    owner: Optional[OrderOwner] = Field(default=None, alias="user")


class OrderMessageResponse(BaseModel):
    message: str
    order: OrderResponse


# --- Sales summary ---
# Each row keeps the ``_id`` grouping key clients already consume.

class SalesTotals(BaseModel):
    key: Optional[str] = Field(default=None, alias="_id")
    num_orders: int
    total_sales: float

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class UserTotals(BaseModel):
    key: Optional[str] = Field(default=None, alias="_id")
    num_users: int

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class DailySales(BaseModel):
    day: str = Field(alias="_id")
    orders: int
    sales: float

    class Config:
        populate_by_name = True


class CategoryCount(BaseModel):
    category: str = Field(alias="_id")
    count: int

    class Config:
        populate_by_name = True


class SalesSummary(BaseModel):
    users: List[UserTotals]
    orders: List[SalesTotals]
    daily_orders: List[DailySales]
    product_categories: List[CategoryCount]

    class Config:
        alias_generator = to_camel
        populate_by_name = True
