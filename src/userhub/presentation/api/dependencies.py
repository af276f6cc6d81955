"""FastAPI dependency injection for the userhub API.

Provides dependencies for:
- Settings
- The shared user repository
- Service instances
"""

import logging
from typing import Annotated

from fastapi import Depends, Request

from userhub.application.services import UserService
from userhub.domain.user import UserRepository
from userhub.infrastructure.persistence.memory import InMemoryUserRepository
from userhub_config.settings import Settings

logger = logging.getLogger(__name__)


def build_user_repository(settings: Settings) -> UserRepository:
    """Create the repository owned by one application instance."""
    if settings.seed_sample_users:
        logger.info("Creating in-memory user repository with sample data")
        return InMemoryUserRepository.with_sample_data()
    logger.info("Creating empty in-memory user repository")
    return InMemoryUserRepository()


def get_settings_from_app(request: Request) -> Settings:
    """Settings the running application was created with."""
    return request.app.state.settings


def get_user_repository(request: Request) -> UserRepository:
    """
    Get the application's user repository.

    One repository is created per application and shared by every request,
    so all request threads go through the same lock.
    """
    return request.app.state.user_repository


# Type alias for injected repository
UserRepo = Annotated[UserRepository, Depends(get_user_repository)]


def get_user_service(user_repository: UserRepo) -> UserService:
    """Get user service bound to the shared repository."""
    return UserService(user_repository=user_repository)


# Type aliases for injected settings and service
AppSettings = Annotated[Settings, Depends(get_settings_from_app)]
UserServiceDep = Annotated[UserService, Depends(get_user_service)]
