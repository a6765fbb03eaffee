"""Package entity (read-side view used by this service)."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from depot.domain.model.common import DomainModel
from depot.domain.value import PackageId


class Package(DomainModel):
    """Published package.

    Owners are stored in a separate relation, see PackageRepository.add_owner.
    """

    id: PackageId
    name: str
    description: Optional[str] = None
    download_count: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
