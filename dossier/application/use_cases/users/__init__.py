from dossier.application.use_cases.users.create_user import CreateUserUseCase
from dossier.application.use_cases.users.user_management import UserManagementService
from dossier.application.use_cases.users.user_queries import UserQueryService

__all__ = ["CreateUserUseCase", "UserManagementService", "UserQueryService"]
