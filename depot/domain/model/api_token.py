"""API token entity."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from depot.domain.model.common import DomainModel
from depot.domain.value import AccountId, ApiTokenId


class ApiToken(DomainModel):
    """Long-lived secret used to authenticate API requests.

    The secret is generated once and never regenerated. It points at the
    owning account by surrogate id, so it keeps resolving to the same
    account however often that account's provider fields change.
    """

    id: ApiTokenId
    account_id: AccountId
    name: str
    secret: str
    created_at: datetime = Field(default_factory=datetime.now)
    last_used_at: Optional[datetime] = None
