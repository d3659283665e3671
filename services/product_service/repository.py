from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import func, select
from .models import Product

class ProductRepository:

    @staticmethod
    async def create_product(db: AsyncSession, product: Product):
        db.add(product)
        await db.commit()
        await db.refresh(product)
        return product

    @staticmethod
    async def get_all_products(db: AsyncSession, category: str | None = None):
        stmt = select(Product).order_by(Product.id)
        if category:
            stmt = stmt.where(Product.category == category)
        result = await db.execute(stmt)
        return result.scalars().all()

    @staticmethod
    async def get_product_by_id(db: AsyncSession, product_id: int):
        result = await db.execute(select(Product).where(Product.id == product_id))
        return result.scalars().first()

    @staticmethod
    async def get_product_by_slug(db: AsyncSession, slug: str):
        result = await db.execute(select(Product).where(Product.slug == slug))
        return result.scalars().first()

    @staticmethod
    async def count_by_category(db: AsyncSession):
        stmt = (
            select(Product.category, func.count(Product.id).label("count"))
            .group_by(Product.category)
            .order_by(Product.category)
        )
        result = await db.execute(stmt)
        return result.all()
