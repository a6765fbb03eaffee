"""Domain layer DI providers."""

from dishka import Scope, provide

from depot.config import AuthSettings, FeedSettings
from depot.domain.repository import (
    AccountRepository,
    ApiTokenRepository,
    FollowRepository,
    PackageRepository,
    VersionRepository,
)
from depot.domain.service import (
    AccountService,
    ApiTokenService,
    AuthService,
    DownloadService,
    FeedService,
    FollowService,
    JWTService,
    OAuthClient,
    PackageService,
    ProfileService,
)
from depot.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Domain services provider.

    Services are REQUEST-scoped to share the request's repositories and
    therefore its transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_account_service(
        self, account_repository: AccountRepository
    ) -> AccountService:
        return AccountService(account_repository=account_repository)

    @provide
    def get_api_token_service(
        self,
        api_token_repository: ApiTokenRepository,
        account_repository: AccountRepository,
        auth_settings: AuthSettings,
    ) -> ApiTokenService:
        return ApiTokenService(
            api_token_repository=api_token_repository,
            account_repository=account_repository,
            auth_settings=auth_settings,
        )

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_auth_service(
        self,
        oauth_client: OAuthClient,
        jwt_service: JWTService,
        api_token_service: ApiTokenService,
    ) -> AuthService:
        """Provide authentication service.

        Args:
            oauth_client: Identity provider client (GitHub)
            jwt_service: Session token service
            api_token_service: API token service
        """
        return AuthService(
            oauth_client=oauth_client,
            jwt_service=jwt_service,
            api_token_service=api_token_service,
        )

    @provide
    def get_profile_service(
        self, account_repository: AccountRepository
    ) -> ProfileService:
        return ProfileService(account_repository=account_repository)

    @provide
    def get_follow_service(self, follow_repository: FollowRepository) -> FollowService:
        return FollowService(follow_repository=follow_repository)

    @provide
    def get_feed_service(
        self,
        follow_repository: FollowRepository,
        version_repository: VersionRepository,
        feed_settings: FeedSettings,
    ) -> FeedService:
        return FeedService(
            follow_repository=follow_repository,
            version_repository=version_repository,
            feed_settings=feed_settings,
        )

    @provide
    def get_package_service(
        self, package_repository: PackageRepository
    ) -> PackageService:
        return PackageService(package_repository=package_repository)

    @provide
    def get_download_service(
        self, package_repository: PackageRepository
    ) -> DownloadService:
        return DownloadService(package_repository=package_repository)
