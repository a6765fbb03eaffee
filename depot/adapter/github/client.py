"""GitHub OAuth client implementation.

Standard OAuth web flow: the browser is sent to GitHub with a state
value, GitHub calls back with a code, and the code is exchanged for an
access token which is then used to read ``GET /user``.
"""

from urllib.parse import urlencode

import httpx
import logfire

from depot.adapter.error import ProviderError
from depot.config import GitHubSettings
from depot.domain.service.auth_service import OAuthClient
from depot.domain.value import ProviderIdentity


class GitHubOAuthError(ProviderError):
    """GitHub OAuth error."""

    pass


class GitHubOAuthClient(OAuthClient):
    """Base class for GitHub OAuth clients.

    Provides type distinction for dependency injection.
    """

    pass


class RealGitHubOAuthClient(GitHubOAuthClient):
    """GitHub OAuth client talking to github.com over httpx."""

    def __init__(
        self,
        settings: GitHubSettings,
        redirect_uri: str,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize GitHub OAuth client.

        Args:
            settings: GitHub app credentials and endpoints
            redirect_uri: Callback URL registered with the GitHub app
            timeout: Per-request timeout in seconds
            transport: Optional httpx transport (tests use httpx.MockTransport)
        """
        self.settings = settings
        self.redirect_uri = redirect_uri
        self.timeout = timeout
        self.transport = transport

    def authorize_url(self, state: str) -> str:
        params = {
            "client_id": self.settings.client_id,
            "redirect_uri": self.redirect_uri,
            "scope": self.settings.scope,
            "state": state,
        }
        return f"{self.settings.authorize_url}?{urlencode(params)}"

    async def exchange(self, code: str) -> ProviderIdentity:
        """Exchange a callback code for the user's GitHub identity.

        Args:
            code: Authorization code from the callback

        Returns:
            Identity read from ``GET /user``

        Raises:
            GitHubOAuthError: If either request fails or returns a malformed body
        """
        async with httpx.AsyncClient(
            timeout=self.timeout, transport=self.transport
        ) as client:
            access_token = await self._exchange_code_for_token(client, code)
            user = await self._get_user(client, access_token)

        try:
            identity = ProviderIdentity(
                external_id=user["id"],
                login=user["login"],
                email=user.get("email"),
                name=user.get("name"),
                avatar_url=user.get("avatar_url"),
                access_token=access_token,
            )
        except (KeyError, TypeError, ValueError) as e:
            logfire.error("GitHub user response malformed", error=str(e))
            raise GitHubOAuthError("Malformed GitHub user response") from e

        logfire.info(
            "GitHub OAuth completed",
            login=identity.login.root,
            user_id=identity.external_id,
        )
        return identity

    async def _exchange_code_for_token(
        self, client: httpx.AsyncClient, code: str
    ) -> str:
        data = {
            "client_id": self.settings.client_id,
            "client_secret": self.settings.client_secret,
            "code": code,
            "redirect_uri": self.redirect_uri,
        }
        try:
            response = await client.post(
                self.settings.token_url,
                data=data,
                headers={"Accept": "application/json"},
            )
        except httpx.HTTPError as e:
            logfire.error("GitHub token exchange HTTP error", error=str(e))
            raise GitHubOAuthError(f"HTTP error during token exchange: {e}") from e

        if response.status_code != 200:
            logfire.error(
                "GitHub token exchange failed",
                status_code=response.status_code,
                error=response.text,
            )
            raise GitHubOAuthError(f"Token exchange failed: {response.status_code}")

        try:
            result = response.json()
        except ValueError as e:
            logfire.error("GitHub token response not JSON", error=str(e))
            raise GitHubOAuthError("Malformed token response") from e
        if not isinstance(result, dict):
            raise GitHubOAuthError("Malformed token response")

        # GitHub reports bad codes with a 200 and an "error" field
        if "access_token" not in result:
            logfire.warn(
                "GitHub rejected authorization code",
                error=result.get("error"),
                description=result.get("error_description"),
            )
            raise GitHubOAuthError(
                result.get("error_description") or "Authorization code rejected"
            )
        return result["access_token"]

    async def _get_user(self, client: httpx.AsyncClient, access_token: str) -> dict:
        try:
            response = await client.get(
                f"{self.settings.api_url}/user",
                headers={
                    "Authorization": f"Bearer {access_token}",
                    "Accept": "application/vnd.github+json",
                },
            )
        except httpx.HTTPError as e:
            logfire.error("GitHub user request HTTP error", error=str(e))
            raise GitHubOAuthError(f"HTTP error fetching user: {e}") from e

        if response.status_code != 200:
            logfire.error(
                "GitHub user request failed",
                status_code=response.status_code,
                error=response.text,
            )
            raise GitHubOAuthError(f"User request failed: {response.status_code}")

        try:
            user = response.json()
        except ValueError as e:
            logfire.error("GitHub user response not JSON", error=str(e))
            raise GitHubOAuthError("Malformed GitHub user response") from e
        if not isinstance(user, dict):
            raise GitHubOAuthError("Malformed GitHub user response")
        return user


class MockGitHubOAuthClient(GitHubOAuthClient):
    """Mock GitHub OAuth client for testing.

    Codes map to identities registered with ``register``; any other code
    yields a fixed default identity. Codes registered with ``reject``
    fail the way a bad code does against GitHub.
    """

    DEFAULT_IDENTITY = ProviderIdentity(
        external_id=1,
        login="mockuser",
        email="mock@example.com",
        name="Mock User",
        avatar_url="https://avatars.example.com/mockuser",
        access_token="gho_mock",
    )

    def __init__(self) -> None:
        self._identities: dict[str, ProviderIdentity] = {}
        self._rejected: set[str] = set()

    def register(self, code: str, identity: ProviderIdentity) -> None:
        self._identities[code] = identity

    def reject(self, code: str) -> None:
        self._rejected.add(code)

    def authorize_url(self, state: str) -> str:
        return f"https://github.com/login/oauth/authorize?state={state}&mock=true"

    async def exchange(self, code: str) -> ProviderIdentity:
        if code in self._rejected:
            raise GitHubOAuthError("Authorization code rejected")
        return self._identities.get(code, self.DEFAULT_IDENTITY)
