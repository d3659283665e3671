from sqlalchemy import Column, DateTime, Float, Integer, String
from sqlalchemy.sql import func

from shared.config.database import Base

class Product(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    slug = Column(String, unique=True, nullable=False, index=True)
    category = Column(String, nullable=False, index=True)
    image = Column(String, nullable=True)
    price = Column(Float, nullable=False)
    count_in_stock = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
