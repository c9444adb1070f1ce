from dependency_injector import containers, providers
from sqlalchemy.orm import Session

from user_api.application.users.services.user_service import UserService
from user_api.infrastructure.users.repositories.user_repository import UserRepository


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    # Request-scoped session, supplied per call as ``user_repository__db``
    db = providers.Dependency(instance_of=Session)

    # Repositories
    user_repository = providers.Factory(UserRepository, db=db)

    # Services
    user_service = providers.Factory(
        UserService,
        user_repository=user_repository,
    )


# Initialize container
container = Container()
