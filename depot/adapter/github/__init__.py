"""GitHub OAuth adapter."""

from .client import (
    GitHubOAuthClient,
    GitHubOAuthError,
    MockGitHubOAuthClient,
    RealGitHubOAuthClient,
)

__all__ = [
    "GitHubOAuthClient",
    "GitHubOAuthError",
    "MockGitHubOAuthClient",
    "RealGitHubOAuthClient",
]
