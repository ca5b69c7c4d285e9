"""Initial property back office schema.

- room_types
- rooms
- tenants
- contracts
- transactions
- maintenance
- settings
- users

Ids are generated client-side (uuid4), so no database extension is needed.
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = "3c1d7a52e0b4"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list:
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
    ]


def _string_list(name: str) -> sa.Column:
    return sa.Column(name, postgresql.JSONB(), nullable=False, server_default=sa.text("'[]'::jsonb"))


def upgrade() -> None:
    op.create_table(
        "room_types",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id", name="pk_room_types"),
    )

    op.create_table(
        "rooms",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("room_type_id", sa.UUID(), nullable=False),
        sa.Column("floor", sa.Integer(), nullable=True),
        sa.Column("area", sa.Numeric(10, 2), nullable=True),
        sa.Column("price", sa.Numeric(14, 2), nullable=False),
        sa.Column("status", sa.Text(), nullable=False, server_default="vacant"),
        sa.Column("description", sa.Text(), nullable=True),
        _string_list("amenities"),
        _string_list("images"),
        _string_list("videos"),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id", name="pk_rooms"),
        sa.ForeignKeyConstraint(["room_type_id"], ["room_types.id"], name="fk_rooms_room_type_id_room_types"),
    )
    op.create_index("ix_rooms_room_type_id", "rooms", ["room_type_id"])

    op.create_table(
        "tenants",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("email", sa.Text(), nullable=False),
        sa.Column("phone", sa.Text(), nullable=False),
        sa.Column("identity_card", sa.Text(), nullable=True),
        sa.Column("date_of_birth", sa.Date(), nullable=True),
        sa.Column("address", sa.Text(), nullable=True),
        sa.Column("start_date", sa.Date(), nullable=True),
        sa.Column("end_date", sa.Date(), nullable=True),
        sa.Column("room_id", sa.UUID(), nullable=True),
        sa.Column("avatar", sa.Text(), nullable=True),
        sa.Column("status", sa.Text(), nullable=False, server_default="active"),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id", name="pk_tenants"),
        sa.ForeignKeyConstraint(
            ["room_id"], ["rooms.id"], name="fk_tenants_room_id_rooms", ondelete="SET NULL"
        ),
    )
    op.create_index("ix_tenants_room_id", "tenants", ["room_id"])

    op.create_table(
        "contracts",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("tenant_id", sa.UUID(), nullable=False),
        sa.Column("room_id", sa.UUID(), nullable=False),
        sa.Column("start_date", sa.Date(), nullable=False),
        sa.Column("end_date", sa.Date(), nullable=False),
        sa.Column("deposit", sa.Numeric(14, 2), nullable=False),
        sa.Column("monthly_rent", sa.Numeric(14, 2), nullable=False),
        _string_list("terms"),
        sa.Column("status", sa.Text(), nullable=False, server_default="active"),
        sa.Column("termination_reason", sa.Text(), nullable=True),
        sa.Column("termination_date", sa.Date(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id", name="pk_contracts"),
        sa.ForeignKeyConstraint(["tenant_id"], ["tenants.id"], name="fk_contracts_tenant_id_tenants"),
        sa.ForeignKeyConstraint(["room_id"], ["rooms.id"], name="fk_contracts_room_id_rooms"),
    )
    op.create_index("ix_contracts_tenant_id", "contracts", ["tenant_id"])
    op.create_index("ix_contracts_room_id", "contracts", ["room_id"])
    op.create_index("ix_contracts_end_date", "contracts", ["end_date"])
    op.create_index("ix_contracts_status", "contracts", ["status"])

    op.create_table(
        "transactions",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("type", sa.Text(), nullable=False),
        sa.Column("amount", sa.Numeric(14, 2), nullable=False),
        sa.Column("category", sa.Text(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("date", sa.Date(), nullable=False),
        sa.Column("room_id", sa.UUID(), nullable=True),
        sa.Column("tenant_id", sa.UUID(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id", name="pk_transactions"),
        sa.ForeignKeyConstraint(
            ["room_id"], ["rooms.id"], name="fk_transactions_room_id_rooms", ondelete="SET NULL"
        ),
        sa.ForeignKeyConstraint(
            ["tenant_id"], ["tenants.id"], name="fk_transactions_tenant_id_tenants", ondelete="SET NULL"
        ),
    )
    op.create_index("ix_transactions_type", "transactions", ["type"])
    op.create_index("ix_transactions_date", "transactions", ["date"])

    op.create_table(
        "maintenance",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("equipment_id", sa.Text(), nullable=False),
        sa.Column("equipment_name", sa.Text(), nullable=False),
        sa.Column("maintenance_type", sa.Text(), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("start_date", sa.Date(), nullable=False),
        sa.Column("priority", sa.Text(), nullable=False),
        sa.Column("assigned_to", sa.Text(), nullable=False),
        sa.Column("status", sa.Text(), nullable=False, server_default="pending"),
        sa.Column("notes", sa.Text(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id", name="pk_maintenance"),
    )
    op.create_index("ix_maintenance_start_date", "maintenance", ["start_date"])

    op.create_table(
        "settings",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("building_name", sa.Text(), nullable=False, server_default=""),
        sa.Column("building_address", sa.Text(), nullable=False, server_default=""),
        sa.Column("building_phone", sa.Text(), nullable=False, server_default=""),
        sa.Column("building_email", sa.Text(), nullable=False, server_default=""),
        sa.Column("language", sa.Text(), nullable=False, server_default="vi"),
        sa.Column("notifications", sa.Boolean(), nullable=False, server_default=sa.text("true")),
        sa.Column("email_notifications", sa.Boolean(), nullable=False, server_default=sa.text("true")),
        sa.Column("currency", sa.Text(), nullable=False, server_default="VND"),
        sa.Column("timezone", sa.Text(), nullable=False, server_default="Asia/Ho_Chi_Minh"),
        sa.Column("date_format", sa.Text(), nullable=False, server_default="DD/MM/YYYY"),
        _string_list("income_categories"),
        _string_list("expense_categories"),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id", name="pk_settings"),
    )

    op.create_table(
        "users",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("email", sa.Text(), nullable=False),
        sa.Column("phone", sa.Text(), nullable=False),
        sa.Column("role", sa.Text(), nullable=False),
        sa.Column("status", sa.Text(), nullable=False, server_default="active"),
        sa.Column("hashed_password", sa.Text(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id", name="pk_users"),
        sa.UniqueConstraint("email", name="uq_users_email"),
    )
    # case-insensitive uniqueness on top of the plain constraint
    op.execute("CREATE UNIQUE INDEX IF NOT EXISTS ux_users_email_lower ON users (lower(email))")


def downgrade() -> None:
    op.execute("DROP INDEX IF EXISTS ux_users_email_lower")
    op.drop_table("users")
    op.drop_table("settings")
    op.drop_index("ix_maintenance_start_date", table_name="maintenance")
    op.drop_table("maintenance")
    op.drop_index("ix_transactions_date", table_name="transactions")
    op.drop_index("ix_transactions_type", table_name="transactions")
    op.drop_table("transactions")
    op.drop_index("ix_contracts_status", table_name="contracts")
    op.drop_index("ix_contracts_end_date", table_name="contracts")
    op.drop_index("ix_contracts_room_id", table_name="contracts")
    op.drop_index("ix_contracts_tenant_id", table_name="contracts")
    op.drop_table("contracts")
    op.drop_index("ix_tenants_room_id", table_name="tenants")
    op.drop_table("tenants")
    op.drop_index("ix_rooms_room_type_id", table_name="rooms")
    op.drop_table("rooms")
    op.drop_table("room_types")
