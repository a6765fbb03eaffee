"""SQLAlchemy table definitions for Depot.

They match the schema created by the Alembic migrations.
"""

from sqlalchemy import (
    BigInteger,
    Boolean,
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
    text,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP

metadata = MetaData()

# ============================================================================
# ACCOUNTS
# ============================================================================
accounts_table = Table(
    "accounts",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("external_id", BigInteger, nullable=False),  # GitHub user id
    Column("login", String(255), nullable=False),
    Column("name", String(255), nullable=True),
    Column("avatar_url", Text, nullable=True),
    Column("email", String(255), nullable=True),
    Column("access_token", Text, nullable=False),
    Column(
        "created_at",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=text("NOW()"),
    ),
    Column(
        "updated_at",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=text("NOW()"),
    ),
)

Index("uq_accounts_external_id", accounts_table.c.external_id, unique=True)
Index("idx_accounts_login", accounts_table.c.login)

# ============================================================================
# API TOKENS
# ============================================================================
api_tokens_table = Table(
    "api_tokens",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column(
        "account_id",
        Integer,
        ForeignKey("accounts.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("name", String(255), nullable=False),
    Column("secret", String(255), nullable=False),
    Column(
        "created_at",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=text("NOW()"),
    ),
    Column("last_used_at", TIMESTAMP(timezone=True), nullable=True),
)

Index("uq_api_tokens_secret", api_tokens_table.c.secret, unique=True)
Index("idx_api_tokens_account_id", api_tokens_table.c.account_id)

# ============================================================================
# PACKAGES
# ============================================================================
packages_table = Table(
    "packages",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", String(255), nullable=False),
    Column("description", Text, nullable=True),
    Column("download_count", BigInteger, nullable=False, server_default="0"),
    Column(
        "created_at",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=text("NOW()"),
    ),
    Column(
        "updated_at",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=text("NOW()"),
    ),
    UniqueConstraint("name", name="uq_packages_name"),
    CheckConstraint("download_count >= 0", name="ck_packages_downloads"),
)

package_owners_table = Table(
    "package_owners",
    metadata,
    Column(
        "package_id",
        Integer,
        ForeignKey("packages.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "account_id",
        Integer,
        ForeignKey("accounts.id", ondelete="CASCADE"),
        primary_key=True,
    ),
)

Index("idx_package_owners_account_id", package_owners_table.c.account_id)

# ============================================================================
# VERSIONS
# ============================================================================
versions_table = Table(
    "versions",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column(
        "package_id",
        Integer,
        ForeignKey("packages.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("number", String(255), nullable=False),
    Column("download_count", BigInteger, nullable=False, server_default="0"),
    Column("yanked", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=text("NOW()"),
    ),
    UniqueConstraint("package_id", "number", name="uq_versions_number"),
)

# Feed ordering: newest first per followed package
Index(
    "idx_versions_package_created",
    versions_table.c.package_id,
    versions_table.c.created_at.desc(),
    versions_table.c.id.desc(),
)

# ============================================================================
# FOLLOWS
# ============================================================================
follows_table = Table(
    "follows",
    metadata,
    Column(
        "account_id",
        Integer,
        ForeignKey("accounts.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "package_id",
        Integer,
        ForeignKey("packages.id", ondelete="CASCADE"),
        primary_key=True,
    ),
)
