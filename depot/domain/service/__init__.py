"""Domain services."""

from .account_service import AccountService
from .api_token_service import ApiTokenService
from .auth_service import AuthService, OAuthClient
from .base import Service
from .download_service import DownloadService
from .feed_service import FeedPage, FeedService
from .follow_service import FollowService
from .jwt_service import JWTService
from .package_service import PackageService
from .profile_service import ProfileService

__all__ = [
    "AccountService",
    "ApiTokenService",
    "AuthService",
    "DownloadService",
    "FeedPage",
    "FeedService",
    "FollowService",
    "JWTService",
    "OAuthClient",
    "PackageService",
    "ProfileService",
    "Service",
]
