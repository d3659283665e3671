from contextlib import asynccontextmanager

from fastapi import FastAPI
from shared.config.database import create_tables
from shared.errors.handlers import install_exception_handlers
from shared.observability import setup_observability
from .router import router, public_router
from .models import Product  # noqa: F401 registers model with SQLAlchemy Base


@asynccontextmanager
async def lifespan(app: FastAPI):
    await create_tables()
    yield


product_app = FastAPI(
    title="Product Service",
    version="1.0.0",
    lifespan=lifespan,
)

setup_observability(product_app, "product_service", expose_metrics=False, trace_requests=False)
install_exception_handlers(product_app)

product_app.include_router(public_router)
product_app.include_router(router)
