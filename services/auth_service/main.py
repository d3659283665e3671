from contextlib import asynccontextmanager

from fastapi import FastAPI

from shared.config.database import create_tables
from shared.errors.handlers import install_exception_handlers
from shared.observability.setup import setup_observability

from .models import User  # noqa: F401 registers model with SQLAlchemy Base
from .router import router, public_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    await create_tables()
    yield


auth_app = FastAPI(
    title="Auth Service",
    version="2.0.0",
    description="JWT authentication: register, login, current profile.",
    lifespan=lifespan,
)

setup_observability(auth_app, "auth_service", expose_metrics=False, trace_requests=False)
install_exception_handlers(auth_app)

auth_app.include_router(public_router)
auth_app.include_router(router)
