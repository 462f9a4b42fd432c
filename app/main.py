# Standard library imports
from pathlib import Path
from contextlib import asynccontextmanager
import logging

# External package imports
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Local application imports
from .api.v1 import user_router
from .api.error_handlers import register_error_handlers
from .core.config import get_settings
from .core.logging_config import setup_logging
from .di.container import get_container
from .domain.repositories.user_repository import UserRepository
from .infrastructure.db.mongo_connection import close_database

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.
    
    Ensures the users collection indexes exist on startup and closes the
    MongoDB client on shutdown.
    """
    settings = get_settings()
    
    if settings.mongo_ensure_indexes:
        try:
            user_repository = get_container().get(UserRepository)
            await user_repository.ensure_indexes()
        except Exception as e:
            # Don't fail app startup if MongoDB is unavailable; writes will surface errors per request
            logger.error(f"Failed to ensure user indexes: {e}", exc_info=True)
    
    yield
    
    close_database()
    logger.info("Application shutdown complete")


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.
    
    This function sets up the FastAPI application with:
    - Environment variable loading
    - Logging configuration
    - CORS middleware configuration
    - Error handlers and API route registration
    
    Returns:
        Configured FastAPI application instance
    """
    # Load environment variables from .env file
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path)
    
    settings = get_settings()
    setup_logging(settings.log_level)
    
    application = FastAPI(
        title="User Service API",
        version="1.0.0",
        description="CRUD service for user profiles backed by MongoDB",
        lifespan=lifespan
    )
    
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials="*" not in settings.cors_allow_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    
    register_error_handlers(application)
    
    application.include_router(user_router, prefix="/v1/users")
    
    return application


# Create application instance
app = create_application()
