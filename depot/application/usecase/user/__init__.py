"""User use cases."""

from .get_user_packages import GetUserPackagesUseCase
from .get_user_profile import GetUserProfileUseCase
from .get_user_stats import GetUserStatsUseCase
from .update_user_email import UpdateUserEmailUseCase

__all__ = [
    "GetUserPackagesUseCase",
    "GetUserProfileUseCase",
    "GetUserStatsUseCase",
    "UpdateUserEmailUseCase",
]
