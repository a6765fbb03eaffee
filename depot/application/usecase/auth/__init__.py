"""Authentication use cases."""

from .get_authorize_url import GetAuthorizeUrlUseCase
from .get_current_user import GetCurrentUserUseCase
from .login import LoginUseCase

__all__ = ["GetAuthorizeUrlUseCase", "GetCurrentUserUseCase", "LoginUseCase"]
