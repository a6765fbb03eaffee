"""Account aggregate root.

An account is created the first time someone logs in through GitHub and
refreshed on every later login.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from depot.domain.model.common import DomainModel
from depot.domain.value import AccountId, Login


class Account(DomainModel):
    """Registry account bound to exactly one GitHub identity.

    Field ownership:
    - login, name, avatar_url, access_token belong to the provider and are
      overwritten on every login
    - email belongs to the user and is only changed through profile edits
    """

    id: AccountId
    external_id: int  # GitHub user id, the reconciliation key
    login: Login
    name: Optional[str] = None
    avatar_url: Optional[str] = None
    email: Optional[str] = None
    access_token: str
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
