"""Mappers between database rows and domain models.

Domain models are frozen pydantic models, so rows are mapped by hand
rather than through SQLAlchemy's ORM.
"""

from typing import Any, Mapping

from depot.domain.model import Account, ApiToken, Package, Version
from depot.domain.value import AccountId, ApiTokenId, Login, PackageId, VersionId


def row_to_account(row: Mapping[str, Any]) -> Account:
    """Convert an accounts row to an Account.

    Args:
        row: Database row mapping

    Returns:
        Account domain model
    """
    return Account(
        id=AccountId(row["id"]),
        external_id=row["external_id"],
        login=Login(row["login"]),
        name=row.get("name"),
        avatar_url=row.get("avatar_url"),
        email=row.get("email"),
        access_token=row["access_token"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def row_to_api_token(row: Mapping[str, Any]) -> ApiToken:
    return ApiToken(
        id=ApiTokenId(row["id"]),
        account_id=AccountId(row["account_id"]),
        name=row["name"],
        secret=row["secret"],
        created_at=row["created_at"],
        last_used_at=row.get("last_used_at"),
    )


def row_to_package(row: Mapping[str, Any]) -> Package:
    return Package(
        id=PackageId(row["id"]),
        name=row["name"],
        description=row.get("description"),
        download_count=row["download_count"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def row_to_version(row: Mapping[str, Any]) -> Version:
    return Version(
        id=VersionId(row["id"]),
        package_id=PackageId(row["package_id"]),
        number=row["number"],
        download_count=row["download_count"],
        yanked=row["yanked"],
        created_at=row["created_at"],
    )
