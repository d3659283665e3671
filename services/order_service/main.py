from contextlib import asynccontextmanager

from fastapi import FastAPI
from shared.config.database import create_tables
from shared.errors.handlers import install_exception_handlers
from shared.observability import setup_observability
from shared.security import limiter
from .router import router, public_router
from .models import Order  # noqa: F401 registers model with SQLAlchemy Base
# Orders reference users and the summary reads products
from services.auth_service.models import User  # noqa: F401
from services.product_service.models import Product  # noqa: F401


@asynccontextmanager
async def lifespan(app: FastAPI):
    await create_tables()
    yield


order_app = FastAPI(title="Order Service", version="1.0.0", lifespan=lifespan)

# --- OBSERVABILITY BOOTSTRAP ---
setup_observability(order_app, "order_service", expose_metrics=False, trace_requests=False)

# --- ERRORS & SECURITY ---
install_exception_handlers(order_app)
order_app.state.limiter = limiter

order_app.include_router(public_router)
order_app.include_router(router)
