"""Version entity."""

from datetime import datetime

from pydantic import Field

from depot.domain.model.common import DomainModel
from depot.domain.value import PackageId, VersionId


class Version(DomainModel):
    """A published version of a package."""

    id: VersionId
    package_id: PackageId
    number: str
    download_count: int = Field(default=0, ge=0)
    yanked: bool = False
    created_at: datetime = Field(default_factory=datetime.now)
