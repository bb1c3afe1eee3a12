"""create registry tables

Revision ID: 4f2a9c1d7e30
Revises:
Create Date: 2026-10-19 14:30:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '4f2a9c1d7e30'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade():
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("wallet_address", sa.String(128), nullable=False),
        sa.Column("username", sa.String(128), nullable=True),
        sa.Column("email", sa.String(256), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_users_wallet_address", "users", ["wallet_address"], unique=True)

    op.create_table(
        "ip_assets",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("ip_id", sa.String(128), nullable=False),
        sa.Column("user_id", sa.Integer(), sa.ForeignKey("users.id"), nullable=True),

        sa.Column("title", sa.String(256), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("asset_type", sa.String(16), nullable=False),
        sa.Column("file_name", sa.String(256), nullable=False),
        sa.Column("file_size", sa.Integer(), nullable=True),
        sa.Column("ipfs_hash", sa.String(128), nullable=True),
        sa.Column("metadata_hash", sa.String(128), nullable=True),

        sa.Column("cultural_origin", sa.String(128), nullable=True),
        sa.Column("language", sa.String(64), nullable=True),
        sa.Column("region", sa.String(128), nullable=True),
        sa.Column("creation_date", sa.String(32), nullable=True),

        sa.Column("royalty_rate", sa.Numeric(5, 2), nullable=False),

        sa.Column("registration_tx_hash", sa.String(80), nullable=True),
        sa.Column("license_terms_id", sa.String(80), nullable=True),
        sa.Column("story_ip_id", sa.String(64), nullable=True),

        sa.Column("idgt_registered", sa.Boolean(), nullable=False),
        sa.Column("idgt_reward_amount", sa.String(80), nullable=True),
        sa.Column("idgt_transaction_hash", sa.String(80), nullable=True),

        sa.Column("status", sa.String(16), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_ip_assets_ip_id", "ip_assets", ["ip_id"], unique=True)
    op.create_index("ix_ip_assets_user_id", "ip_assets", ["user_id"])
    op.create_index("ix_ip_assets_status", "ip_assets", ["status"])

    op.create_table(
        "royalty_payments",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("ip_asset_id", sa.Integer(), sa.ForeignKey("ip_assets.id"), nullable=True),
        sa.Column("amount", sa.Numeric(18, 8), nullable=False),
        sa.Column("currency", sa.String(16), nullable=False),
        sa.Column("claimer_address", sa.String(128), nullable=False),
        sa.Column("tx_hash", sa.String(80), nullable=True),
        sa.Column("status", sa.String(16), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_royalty_payments_ip_asset_id", "royalty_payments", ["ip_asset_id"])

    op.create_table(
        "derivative_works",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("parent_ip_id", sa.String(128), nullable=False),
        sa.Column("child_ip_id", sa.String(128), nullable=False),
        sa.Column("license_terms_id", sa.String(80), nullable=False),
        sa.Column("registration_tx_hash", sa.String(80), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_derivative_works_parent_ip_id", "derivative_works", ["parent_ip_id"])


def downgrade():
    op.drop_index("ix_derivative_works_parent_ip_id", table_name="derivative_works")
    op.drop_table("derivative_works")
    op.drop_index("ix_royalty_payments_ip_asset_id", table_name="royalty_payments")
    op.drop_table("royalty_payments")
    op.drop_index("ix_ip_assets_status", table_name="ip_assets")
    op.drop_index("ix_ip_assets_user_id", table_name="ip_assets")
    op.drop_index("ix_ip_assets_ip_id", table_name="ip_assets")
    op.drop_table("ip_assets")
    op.drop_index("ix_users_wallet_address", table_name="users")
    op.drop_table("users")
