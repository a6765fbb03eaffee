"""GitHub infrastructure providers."""

from dishka import Scope, provide

from depot.adapter.github.client import GitHubOAuthClient, RealGitHubOAuthClient
from depot.config import Settings
from depot.util.di.base import ProviderBase
from depot.util.observability import instrument_httpx


class GitHubProvider(ProviderBase):
    """GitHub component base."""

    __mock_component__ = "github"


class ProdGitHubProvider(GitHubProvider):
    """Production GitHub provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_github_oauth_client(self, settings: Settings) -> GitHubOAuthClient:
        """Provide GitHub OAuth client.

        Raises:
            ValueError: If GitHub OAuth credentials are not configured
        """
        github = settings.auth.github
        if not github.client_id:
            raise ValueError("GitHub OAuth client ID must be configured")
        if not github.client_secret:
            raise ValueError("GitHub OAuth client secret must be configured")

        instrument_httpx()
        return RealGitHubOAuthClient(
            settings=github,
            redirect_uri=settings.auth.github_callback_url,
        )
