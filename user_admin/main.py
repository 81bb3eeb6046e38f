"""
FastAPI Application Factory
Main application setup with startup/shutdown logic
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from typing import Optional
import logging

import httpx

from user_admin.core.config import settings
from user_admin.core.logging_config import setup_logging
from user_admin.clients import (
    user_api_client_init,
    get_user_api_client,
    close_user_api_client
)
from user_admin.repositories.user_repo import UserApiRepository
from user_admin.services.user_list_controller import UserListController
from user_admin.api.v1.router import api_router, screen_router

# Configure logging
setup_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


def create_app(transport: Optional[httpx.AsyncBaseTransport] = None) -> FastAPI:
    """
    Create and configure FastAPI application

    Args:
        transport: Optional httpx transport for the User API client
    """
    app = FastAPI(title="User Management")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[origin for origin in settings.CORS_ORIGINS if origin != "*"],
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )

    logger.info(f"CORS configured for origins: {settings.CORS_ORIGINS}")

    # JSON endpoints under /api, the screen itself at the root
    app.include_router(api_router, prefix="/api")
    app.include_router(screen_router)

    # Startup event
    @app.on_event("startup")
    async def startup_event():
        """Open the User API client and mount the screen"""
        user_api_client_init(transport=transport)
        controller = UserListController(UserApiRepository(get_user_api_client()))
        app.state.controller = controller

        # Mounting loads the list; a failure only sets the error message
        await controller.mount()
        if controller.error:
            logger.warning(f"Initial user list load failed: {controller.error}")
        else:
            logger.info(f"User screen mounted with {len(controller.users)} users")

    # Shutdown event
    @app.on_event("shutdown")
    async def shutdown_event():
        """Close the User API client"""
        await close_user_api_client()
        app.state.controller = None
        logger.info("User screen shutdown")

    return app


# Create app instance
app = create_app()
