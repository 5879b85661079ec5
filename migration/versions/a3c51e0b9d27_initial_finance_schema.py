"""initial fee tracking schema

Revision ID: a3c51e0b9d27
Revises:
Create Date: 2026-10-17
"""

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "a3c51e0b9d27"
down_revision = None
branch_labels = None
depends_on = None


# Decimal values are stored as text (infra.db.base.DecimalText).
MONEY = sa.String(length=40)
HOURS = sa.String(length=40)
RATIO = sa.String(length=40)

STAFF_LOCATION = sa.Enum("RIYADH", "CAIRO", name="stafflocation")
PAYMENT_TYPE = sa.Enum("CONTRACT", "VO", name="paymenttype")
PAYMENT_STATUS = sa.Enum(
    "PENDING",
    "DUE",
    "CLAIMED",
    "INVOICED",
    "PAID_PARTIAL",
    "PAID_FULL",
    name="paymentstatus",
)


def _project_fk() -> sa.ForeignKey:
    return sa.ForeignKey("projects.id", ondelete="CASCADE")


def upgrade() -> None:
    op.create_table(
        "projects",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("code", sa.String(length=64), nullable=False, unique=True),
        sa.Column("total_contract_value", MONEY, nullable=False, server_default=sa.text("'0'")),
        sa.Column("start_date", sa.Date(), nullable=False),
        sa.Column("end_date", sa.Date(), nullable=False),
        sa.Column("manager", sa.String(), nullable=True),
        sa.Column("coordinator", sa.String(), nullable=True),
        sa.Column("overhead_multiplier", RATIO, nullable=False, server_default=sa.text("'2.5'")),
        sa.Column("target_margin", RATIO, nullable=False, server_default=sa.text("'20'")),
        sa.Column("currency", sa.String(length=8), nullable=False, server_default=sa.text("'SAR'")),
        sa.Column("stoppage_days", sa.Integer(), nullable=False, server_default=sa.text("0")),
        sa.Column("percent_complete", RATIO, nullable=False, server_default=sa.text("'0'")),
        sa.Column("is_paused", sa.Boolean(), nullable=False, server_default=sa.text("0")),
        sa.Column("pause_start_date", sa.Date(), nullable=True),
        sa.Column("version", sa.Integer(), nullable=False, server_default=sa.text("1")),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "staff",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("project_id", sa.String(), _project_fk(), nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("role", sa.String(), nullable=True),
        sa.Column("base_rate", MONEY, nullable=False),
        sa.Column("location", STAFF_LOCATION, nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_staff_project_id", "staff", ["project_id"])

    op.create_table(
        "budget_labor",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("project_id", sa.String(), _project_fk(), nullable=False),
        sa.Column("staff_id", sa.String(), nullable=False),
        sa.Column("hours", HOURS, nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_budget_labor_project_id", "budget_labor", ["project_id"])

    op.create_table(
        "budget_expenses",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("project_id", sa.String(), _project_fk(), nullable=False),
        sa.Column("category", sa.String(), nullable=False, server_default=sa.text("'Others'")),
        sa.Column("amount", MONEY, nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_budget_expenses_project_id", "budget_expenses", ["project_id"])

    op.create_table(
        "time_logs",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("project_id", sa.String(), _project_fk(), nullable=False),
        sa.Column("staff_id", sa.String(), nullable=False),
        sa.Column("hours", HOURS, nullable=False),
        sa.Column("phase", sa.String(), nullable=False, server_default=sa.text("'Other'")),
        sa.Column("start_date", sa.Date(), nullable=False),
        sa.Column("end_date", sa.Date(), nullable=False),
        sa.Column("description", sa.String(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_time_logs_project_id", "time_logs", ["project_id"])
    op.create_index("idx_time_logs_staff_id", "time_logs", ["staff_id"])

    op.create_table(
        "expenses",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("project_id", sa.String(), _project_fk(), nullable=False),
        sa.Column("category", sa.String(), nullable=False, server_default=sa.text("'Others'")),
        sa.Column("amount", MONEY, nullable=False),
        sa.Column("description", sa.String(), nullable=True),
        sa.Column("reimbursable", sa.Boolean(), nullable=False, server_default=sa.text("0")),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_expenses_project_id", "expenses", ["project_id"])

    op.create_table(
        "payments",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("project_id", sa.String(), _project_fk(), nullable=False),
        sa.Column("title", sa.String(), nullable=False),
        sa.Column("amount", MONEY, nullable=False),
        sa.Column("date", sa.Date(), nullable=False),
        sa.Column("type", PAYMENT_TYPE, nullable=False),
        sa.Column("status", PAYMENT_STATUS, nullable=False),
        sa.Column("requirements", sa.String(), nullable=True),
        sa.Column("paid_amount", MONEY, nullable=False, server_default=sa.text("'0'")),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_payments_project_id", "payments", ["project_id"])


def downgrade() -> None:
    op.drop_index("idx_payments_project_id", table_name="payments")
    op.drop_table("payments")
    op.drop_index("idx_expenses_project_id", table_name="expenses")
    op.drop_table("expenses")
    op.drop_index("idx_time_logs_staff_id", table_name="time_logs")
    op.drop_index("idx_time_logs_project_id", table_name="time_logs")
    op.drop_table("time_logs")
    op.drop_index("idx_budget_expenses_project_id", table_name="budget_expenses")
    op.drop_table("budget_expenses")
    op.drop_index("idx_budget_labor_project_id", table_name="budget_labor")
    op.drop_table("budget_labor")
    op.drop_index("idx_staff_project_id", table_name="staff")
    op.drop_table("staff")
    op.drop_table("projects")
