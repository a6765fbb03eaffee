"""initial_schema

Create the Depot account and engagement schema:
- Accounts (one per GitHub identity, keyed by external_id)
- API tokens (long-lived secrets owned by an account)
- Packages and their owners
- Versions (with the feed ordering index)
- Follows (account -> package)

Revision ID: 3f9c2d7a1b40
Revises:
Create Date: 2026-10-17 09:12:44.518203

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3f9c2d7a1b40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamp(name: str, nullable: bool = False) -> sa.Column:
    if nullable:
        return sa.Column(name, sa.TIMESTAMP(timezone=True), nullable=True)
    return sa.Column(
        name,
        sa.TIMESTAMP(timezone=True),
        nullable=False,
        server_default=sa.text("NOW()"),
    )


def upgrade() -> None:
    """Upgrade schema."""
    # ========================================================================
    # ACCOUNTS
    # ========================================================================
    op.create_table(
        "accounts",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("external_id", sa.BigInteger(), nullable=False),
        sa.Column("login", sa.String(255), nullable=False),
        sa.Column("name", sa.String(255), nullable=True),
        sa.Column("avatar_url", sa.Text(), nullable=True),
        sa.Column("email", sa.String(255), nullable=True),
        sa.Column("access_token", sa.Text(), nullable=False),
        _timestamp("created_at"),
        _timestamp("updated_at"),
        sa.PrimaryKeyConstraint("id"),
    )
    # Reconciliation key; concurrent first logins race on this
    op.create_index(
        "uq_accounts_external_id", "accounts", ["external_id"], unique=True
    )
    # Logins are recycled by GitHub, so not unique
    op.create_index("idx_accounts_login", "accounts", ["login"])

    # ========================================================================
    # API TOKENS
    # ========================================================================
    op.create_table(
        "api_tokens",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("account_id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("secret", sa.String(255), nullable=False),
        _timestamp("created_at"),
        _timestamp("last_used_at", nullable=True),
        sa.ForeignKeyConstraint(["account_id"], ["accounts.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("uq_api_tokens_secret", "api_tokens", ["secret"], unique=True)
    op.create_index("idx_api_tokens_account_id", "api_tokens", ["account_id"])

    # ========================================================================
    # PACKAGES
    # ========================================================================
    op.create_table(
        "packages",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column(
            "download_count", sa.BigInteger(), nullable=False, server_default="0"
        ),
        _timestamp("created_at"),
        _timestamp("updated_at"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("name", name="uq_packages_name"),
        sa.CheckConstraint("download_count >= 0", name="ck_packages_downloads"),
    )

    op.create_table(
        "package_owners",
        sa.Column("package_id", sa.Integer(), nullable=False),
        sa.Column("account_id", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(["package_id"], ["packages.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["account_id"], ["accounts.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("package_id", "account_id"),
    )
    op.create_index(
        "idx_package_owners_account_id", "package_owners", ["account_id"]
    )

    # ========================================================================
    # VERSIONS
    # ========================================================================
    op.create_table(
        "versions",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("package_id", sa.Integer(), nullable=False),
        sa.Column("number", sa.String(255), nullable=False),
        sa.Column(
            "download_count", sa.BigInteger(), nullable=False, server_default="0"
        ),
        sa.Column("yanked", sa.Boolean(), nullable=False, server_default="false"),
        _timestamp("created_at"),
        sa.ForeignKeyConstraint(["package_id"], ["packages.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("package_id", "number", name="uq_versions_number"),
    )
    # Feed ordering: newest first, id breaks ties
    op.execute(
        "CREATE INDEX idx_versions_package_created "
        "ON versions (package_id, created_at DESC, id DESC)"
    )

    # ========================================================================
    # FOLLOWS
    # ========================================================================
    op.create_table(
        "follows",
        sa.Column("account_id", sa.Integer(), nullable=False),
        sa.Column("package_id", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(["account_id"], ["accounts.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["package_id"], ["packages.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("account_id", "package_id"),
    )


def downgrade() -> None:
    """Downgrade schema."""
    # Drop tables (in reverse order of dependencies)
    op.drop_table("follows")
    op.execute("DROP INDEX IF EXISTS idx_versions_package_created")
    op.drop_table("versions")
    op.drop_index("idx_package_owners_account_id", table_name="package_owners")
    op.drop_table("package_owners")
    op.drop_table("packages")
    op.drop_index("idx_api_tokens_account_id", table_name="api_tokens")
    op.drop_index("uq_api_tokens_secret", table_name="api_tokens")
    op.drop_table("api_tokens")
    op.drop_index("idx_accounts_login", table_name="accounts")
    op.drop_index("uq_accounts_external_id", table_name="accounts")
    op.drop_table("accounts")
