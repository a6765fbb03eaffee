"""OAuth infrastructure provider."""

from dishka import Scope, provide

from depot.adapter.github.client import GitHubOAuthClient
from depot.domain.service.auth_service import OAuthClient
from depot.util.di.base import ProviderBase


class OAuthProvider(ProviderBase):
    """Exposes the configured identity provider client to the domain."""

    scope = Scope.APP

    @provide
    def get_oauth_client(self, github_oauth_client: GitHubOAuthClient) -> OAuthClient:
        return github_oauth_client
