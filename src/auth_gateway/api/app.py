"""FastAPI application for the Auth Gateway."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from auth_gateway import __version__
from auth_gateway.auth import TokenIssuer, get_token_issuer
from auth_gateway.config import Settings, get_settings
from auth_gateway.credentials import (
    CredentialRepository,
    CredentialService,
    SecretHasher,
    credentials_router,
    get_credential_service,
)
from auth_gateway.db import Database
from auth_gateway.errors import GatewayError, gateway_error_handler
from auth_gateway.oauth import create_oauth_router

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    All components are built from the given settings and injected through
    dependency overrides, so nothing reads configuration at request time.

    Args:
        settings: Application settings (uses default if not provided)

    Returns:
        Configured FastAPI application instance.
    """
    settings = settings or get_settings()

    database = Database(settings)
    token_issuer = TokenIssuer(settings)
    credential_service = CredentialService(
        repository=CredentialRepository(database),
        hasher=SecretHasher(settings),
        token_issuer=token_issuer,
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan manager for startup/shutdown events."""
        # The app keeps serving if the store is unreachable; credential
        # routes then fail with 500 until it comes back.
        try:
            await database.init()
            logger.info("Connected to database")
        except Exception as e:
            logger.error("Error occurred while connecting to database: %s", e)

        yield

        await database.close()

    app = FastAPI(
        title="Auth Gateway",
        description="Bearer token issuance and OAuth code exchange broker",
        version=__version__,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.database = database

    app.dependency_overrides[get_token_issuer] = lambda: token_issuer
    app.dependency_overrides[get_credential_service] = lambda: credential_service

    app.add_exception_handler(GatewayError, gateway_error_handler)

    @app.get("/")
    async def root() -> str:
        """Greeting endpoint."""
        return "HELLO TO AUTH ROXS"

    # Health check endpoint
    @app.get("/health")
    async def health_check() -> dict:
        """Health check endpoint."""
        return {"status": "healthy"}

    # Provides: POST /register, POST /login, GET /protected
    app.include_router(credentials_router)

    # Provides: GET /auth/{github,google} and /auth/{github,google}/callback
    app.include_router(create_oauth_router(settings))

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    return app
