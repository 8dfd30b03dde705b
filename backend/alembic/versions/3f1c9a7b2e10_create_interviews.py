from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = "3f1c9a7b2e10"
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        "interviews",
        sa.Column("id", sa.String(length=32), primary_key=True),
        sa.Column("title", sa.Text(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("start_time", sa.Float(), nullable=False),
        sa.Column("status", sa.String(length=64), nullable=False),
        sa.Column("stream_call_id", sa.String(length=255), nullable=False),
        sa.Column("candidate_id", sa.String(length=320), nullable=False),
        sa.Column("interviewer_ids", sa.JSON(), nullable=False),
        sa.Column("end_time", sa.BigInteger(), nullable=True),
        sa.Column("creation_time", sa.BigInteger(), nullable=False),
    )
    # lookups by call id (unique) and by candidate
    op.create_index("ix_interviews_stream_call_id", "interviews", ["stream_call_id"], unique=True)
    op.create_index("ix_interviews_candidate_id", "interviews", ["candidate_id"], unique=False)


def downgrade():
    op.drop_index("ix_interviews_candidate_id", table_name="interviews")
    op.drop_index("ix_interviews_stream_call_id", table_name="interviews")
    op.drop_table("interviews")
