"""cleaning_record table

Revision ID: 0001
Revises:
Create Date: 2025-01-12 10:00:00

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "0001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        "cleaning_record",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("date", sa.Date(), nullable=False),
        sa.Column("time_from", sa.Time(), nullable=False),
        sa.Column("time_to", sa.Time(), nullable=True),
        sa.Column("cleaner_count", sa.Integer(), nullable=False),
        sa.Column("is_paid", sa.Boolean(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    with op.batch_alter_table("cleaning_record", schema=None) as batch_op:
        batch_op.create_index(batch_op.f("ix_cleaning_record_date"), ["date"], unique=False)
        batch_op.create_index(batch_op.f("ix_cleaning_record_is_paid"), ["is_paid"], unique=False)


def downgrade():
    with op.batch_alter_table("cleaning_record", schema=None) as batch_op:
        batch_op.drop_index(batch_op.f("ix_cleaning_record_is_paid"))
        batch_op.drop_index(batch_op.f("ix_cleaning_record_date"))

    op.drop_table("cleaning_record")
