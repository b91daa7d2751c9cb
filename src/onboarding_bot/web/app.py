"""
Onboarding Helper - FastAPI application.

Receives the platform's interactive callbacks. Everything the handlers need
(store, platform client, bot identity, templates) is built once in the
lifespan hook and kept on app.state.onboarding.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from onboarding.api import router as onboarding_router
from onboarding.context import OnboardingContext
from onboarding.signature import load_templates
from onboarding.store import StateStore
from onboarding_bot import __version__
from onboarding_bot.bot import resolve_bot_identity
from onboarding_bot.config import ConfigurationError, Settings, get_settings
from onboarding_bot.db.client import create_kv_store
from onboarding_bot.platform import MattermostClient

logger = logging.getLogger(__name__)


def build_platform_client(config: Settings) -> MattermostClient:
    if not config.mattermost_url or not config.mattermost_bot_token:
        raise ConfigurationError("MATTERMOST_URL and MATTERMOST_BOT_TOKEN are required")
    return MattermostClient(
        config.mattermost_url,
        config.mattermost_bot_token,
        timeout=config.http_timeout_seconds,
    )


def build_context(config: Settings) -> OnboardingContext:
    """
    Resolve all handler dependencies.

    Raises:
        TemplateError: A signature template is missing or malformed
        ConfigurationError: Required settings are missing
        PlatformError: The bot account could not be resolved
    """
    templates = load_templates()
    platform = build_platform_client(config)
    bot = resolve_bot_identity(platform, config)
    return OnboardingContext(
        store=StateStore(create_kv_store(config)),
        platform=platform,
        bot=bot,
        settings=config,
        templates=templates,
    )


def create_app(context: OnboardingContext | None = None) -> FastAPI:
    """
    Build the FastAPI app.

    Args:
        context: Pre-built dependencies (tests); built from settings when None
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        ctx = context or build_context(get_settings())
        app.state.onboarding = ctx
        logger.info("Onboarding helper starting up...")
        logger.info(f"  Language: {ctx.translations.language.value}")
        logger.info(f"  KV backend: {ctx.settings.kv_backend}")
        logger.info(f"  Bot user: {ctx.bot.username} ({ctx.bot.user_id})")
        yield
        if context is None and isinstance(ctx.platform, MattermostClient):
            ctx.platform.close()

    app = FastAPI(title="EOTO Onboarding Helper", version=__version__, lifespan=lifespan)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        # The platform only distinguishes success from client error
        logger.warning(f"Rejected malformed payload on {request.url.path}: {exc.errors()}")
        return JSONResponse(status_code=400, content={"detail": "Malformed request"})

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    app.include_router(onboarding_router)
    return app
