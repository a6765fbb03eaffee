"""Follow relation."""

from depot.domain.model.common import DomainModel
from depot.domain.value import AccountId, PackageId


class Follow(DomainModel):
    """An account following a package.

    Existence is the whole payload: one row per (account, package) pair.
    """

    account_id: AccountId
    package_id: PackageId
