from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from datetime import date
from typing import TYPE_CHECKING

from fastapi import FastAPI

from leavedesk.api.health import router as health_router
from leavedesk.api.router import api_router
from leavedesk.config import Settings, get_settings
from leavedesk.exceptions import setup_exception_handlers
from leavedesk.middleware import setup_middleware
from leavedesk.seed import seed_demo_data
from leavedesk.services.leave import LeaveService
from leavedesk.services.store import LeaveRequestStore
from leavedesk.services.user import InMemoryUserDirectory

if TYPE_CHECKING:
    from collections.abc import AsyncIterator, Callable

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(application: FastAPI) -> AsyncIterator[None]:
    """Application lifespan manager for startup and shutdown."""
    settings: Settings = application.state.settings
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    logger.info("Starting %s v%s [%s]", settings.app_name, settings.app_version, settings.environment)
    yield
    logger.info("Shutting down %s", settings.app_name)


def build_leave_service(settings: Settings, clock: Callable[[], date] = date.today) -> LeaveService:
    """Create fresh in-memory stores and the leave service over them.

    Demo data is dated from the same clock the service validates against.
    """
    users = InMemoryUserDirectory(default_leave_balance=settings.default_leave_balance)
    store = LeaveRequestStore()
    if settings.seed_demo_data:
        seed_demo_data(users, store, clock())
    return LeaveService(
        users,
        store,
        clock=clock,
        default_rejection_reason=settings.default_rejection_reason,
    )


def create_app(settings: Settings | None = None) -> FastAPI:
    """Application factory. Each application owns its own stores."""
    settings = settings or get_settings()

    application = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        lifespan=lifespan,
        docs_url="/docs" if settings.environment != "production" else None,
        redoc_url="/redoc" if settings.environment != "production" else None,
    )

    leave_service = build_leave_service(settings)
    application.state.settings = settings
    application.state.leave_service = leave_service
    application.state.users = leave_service.users

    setup_middleware(application, settings)
    setup_exception_handlers(application)

    application.include_router(health_router)
    application.include_router(api_router)

    return application


app = create_app()
