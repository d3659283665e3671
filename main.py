from contextlib import asynccontextmanager

from fastapi import FastAPI
from shared.config.database import create_tables
from shared.errors.handlers import install_exception_handlers
from shared.observability import setup_observability

# IMPORTANT: import models so they register with Base
from services.auth_service import models as auth_models  # noqa: F401
from services.product_service import models as product_models  # noqa: F401
from services.order_service import models as order_models  # noqa: F401

from services.auth_service.main import auth_app
from services.product_service.main import product_app
from services.order_service.main import order_app


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Mounted apps do not receive lifespan events; create every table here
    await create_tables()
    yield


app = FastAPI(title="Storefront", lifespan=lifespan)

setup_observability(app, "storefront")
install_exception_handlers(app)

app.mount("/api/users", auth_app)
app.mount("/api/products", product_app)
app.mount("/api/orders", order_app)
