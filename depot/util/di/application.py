"""Application layer DI providers."""

from dishka import Scope, provide

from depot.application.usecase.auth import (
    GetAuthorizeUrlUseCase,
    GetCurrentUserUseCase,
    LoginUseCase,
)
from depot.application.usecase.feed import GetUpdatesUseCase
from depot.application.usecase.follow import (
    FollowPackageUseCase,
    GetFollowingUseCase,
    UnfollowPackageUseCase,
)
from depot.application.usecase.user import (
    GetUserPackagesUseCase,
    GetUserProfileUseCase,
    GetUserStatsUseCase,
    UpdateUserEmailUseCase,
)
from depot.config import Settings
from depot.domain.service import (
    AccountService,
    ApiTokenService,
    AuthService,
    DownloadService,
    FeedService,
    FollowService,
    JWTService,
    PackageService,
    ProfileService,
)
from depot.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Application use cases provider."""

    scope = Scope.REQUEST

    # Auth use cases
    @provide
    def get_authorize_url_use_case(
        self, auth_service: AuthService
    ) -> GetAuthorizeUrlUseCase:
        return GetAuthorizeUrlUseCase(auth_service=auth_service)

    @provide
    def get_login_use_case(
        self,
        auth_service: AuthService,
        account_service: AccountService,
        jwt_service: JWTService,
        settings: Settings,
    ) -> LoginUseCase:
        return LoginUseCase(
            auth_service=auth_service,
            account_service=account_service,
            jwt_service=jwt_service,
            settings=settings,
        )

    @provide
    def get_current_user_use_case(
        self,
        account_service: AccountService,
        api_token_service: ApiTokenService,
        settings: Settings,
    ) -> GetCurrentUserUseCase:
        return GetCurrentUserUseCase(
            account_service=account_service,
            api_token_service=api_token_service,
            settings=settings,
        )

    # User use cases
    @provide
    def get_user_profile_use_case(
        self, account_service: AccountService, settings: Settings
    ) -> GetUserProfileUseCase:
        return GetUserProfileUseCase(account_service=account_service, settings=settings)

    @provide
    def get_update_user_email_use_case(
        self, profile_service: ProfileService
    ) -> UpdateUserEmailUseCase:
        return UpdateUserEmailUseCase(profile_service=profile_service)

    @provide
    def get_user_stats_use_case(
        self, account_service: AccountService, download_service: DownloadService
    ) -> GetUserStatsUseCase:
        return GetUserStatsUseCase(
            account_service=account_service, download_service=download_service
        )

    @provide
    def get_user_packages_use_case(
        self, account_service: AccountService, package_service: PackageService
    ) -> GetUserPackagesUseCase:
        return GetUserPackagesUseCase(
            account_service=account_service, package_service=package_service
        )

    # Follow use cases
    @provide
    def get_follow_package_use_case(
        self, follow_service: FollowService, package_service: PackageService
    ) -> FollowPackageUseCase:
        return FollowPackageUseCase(
            follow_service=follow_service, package_service=package_service
        )

    @provide
    def get_unfollow_package_use_case(
        self, follow_service: FollowService, package_service: PackageService
    ) -> UnfollowPackageUseCase:
        return UnfollowPackageUseCase(
            follow_service=follow_service, package_service=package_service
        )

    @provide
    def get_following_use_case(
        self, follow_service: FollowService, package_service: PackageService
    ) -> GetFollowingUseCase:
        return GetFollowingUseCase(
            follow_service=follow_service, package_service=package_service
        )

    # Feed use cases
    @provide
    def get_updates_use_case(
        self, feed_service: FeedService, package_service: PackageService
    ) -> GetUpdatesUseCase:
        return GetUpdatesUseCase(
            feed_service=feed_service, package_service=package_service
        )
