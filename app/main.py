"""
Application entry point.

Creates the FastAPI application and wires together:
- Routers (health and the employees bounded context)
- Error handlers (centralized domain-to-HTTP mapping)
- Security middleware (headers, rate limiting)
- Logging configuration
- The employee repository, injected explicitly

No business logic belongs here.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import Depends, FastAPI

from app.core.config import Settings
from app.core.config import settings as default_settings
from app.domain.employees.ports import EmployeeRepository
from app.infrastructure.employees.schema import init_schema
from app.interfaces.employees.dependencies import build_employee_repository
from app.interfaces.employees.router import router as employees_router
from app.interfaces.health import router as health_router
from app.shared.errors.handlers import register_error_handlers
from app.shared.logging import configure_logging
from app.shared.security.headers import SecurityHeadersMiddleware
from app.shared.security.rate_limiting import (
    ClientRateLimitExceeded,
    build_limiter,
    enforce_rate_limit,
    parse_rate_limit,
    rate_limit_exceeded_handler,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: create the schema, release the engine on exit."""
    engine = app.state.engine
    if engine is not None:
        init_schema(engine)

    yield

    if engine is not None:
        engine.dispose()


def create_app(
    settings: Optional[Settings] = None,
    repository: Optional[EmployeeRepository] = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Registers routers, error handlers, and security middleware.
    This is the composition root of the application.

    Args:
        settings: Configuration to use instead of the environment-loaded one.
        repository: Employee store to use instead of the configured backend.
            The caller owns its schema and lifecycle.

    Returns:
        A fully configured FastAPI application instance.
    """
    settings = settings or default_settings
    configure_logging(level=settings.log_level, sql_echo=settings.database_echo)

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        lifespan=lifespan,
        dependencies=[Depends(enforce_rate_limit)],
    )

    # --- Storage ---
    engine = None
    if repository is None:
        repository, engine = build_employee_repository(settings)
    app.state.settings = settings
    app.state.employee_repository = repository
    app.state.engine = engine
    logger.info("Employee store: %s", type(repository).__name__)

    # --- Rate Limiting ---
    app.state.limiter = build_limiter(settings)
    app.state.rate_limit = parse_rate_limit(settings)
    app.add_exception_handler(ClientRateLimitExceeded, rate_limit_exceeded_handler)

    # --- Security Middleware ---
    app.add_middleware(SecurityHeadersMiddleware)

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    app.include_router(health_router, prefix=settings.api_prefix)
    app.include_router(employees_router, prefix=settings.api_prefix)

    return app


app = create_app()
