"""Strongly typed identifiers for Depot domain entities.

Identifiers are surrogate integer keys assigned by the database.
Using NewType prevents mixing up ids of different entities.
"""

from typing import NewType

AccountId = NewType("AccountId", int)
ApiTokenId = NewType("ApiTokenId", int)
PackageId = NewType("PackageId", int)
VersionId = NewType("VersionId", int)
