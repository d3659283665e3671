from typing import Optional

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


class ProductCreate(BaseModel):
    name: str = Field(min_length=1)
    slug: str = Field(min_length=1)
    category: str = Field(min_length=1)
    image: Optional[str] = None
    price: float = Field(ge=0)
    count_in_stock: int = Field(default=0, ge=0)

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class ProductResponse(ProductCreate):
    id: int

    class Config:
        from_attributes = True
        alias_generator = to_camel
        populate_by_name = True
