import structlog
from fastapi import HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
from .models import Product
from .repository import ProductRepository
from .schemas import ProductCreate

logger = structlog.get_logger(__name__)

class ProductService:

    @staticmethod
    async def create_product(db: AsyncSession, data: ProductCreate):
        if await ProductRepository.get_product_by_slug(db, data.slug):
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail="Product slug already exists",
            )
        product = Product(**data.model_dump())
        product = await ProductRepository.create_product(db, product)
        logger.info("product_created", product_id=product.id, category=product.category)
        return product

    @staticmethod
    async def list_products(db: AsyncSession, category: str | None = None):
        return await ProductRepository.get_all_products(db, category)

    @staticmethod
    async def get_product_by_id(db: AsyncSession, product_id: int):
        return await ProductRepository.get_product_by_id(db, product_id)
