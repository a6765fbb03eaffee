"""Outward-facing projections of domain models."""

from typing import Optional

from pydantic import BaseModel

from depot.domain.model import Account


class AccountView(BaseModel):
    """Account as shown to API clients.

    ``email`` is only populated when the viewer owns the account; every
    other caller sees None.
    """

    id: int
    login: str
    name: Optional[str] = None
    avatar: Optional[str] = None
    url: str
    email: Optional[str] = None

    @classmethod
    def project(
        cls, account: Account, profile_base_url: str, private: bool = False
    ) -> "AccountView":
        """Build the view of an account.

        Args:
            account: Account to project
            profile_base_url: Base of public provider profile pages
            private: True when the viewer is the account owner

        Returns:
            Account view
        """
        return cls(
            id=account.id,
            login=account.login.root,
            name=account.name,
            avatar=account.avatar_url,
            url=f"{profile_base_url.rstrip('/')}/{account.login.root}",
            email=account.email if private else None,
        )
