"""initial_schema

Create the Hive schema:
- Users (identity provider subject, role, team)
- Teams (single default team) and ordered team membership
- Projects and Tasks (team derived through the project)
- Messages (append-only team chat)
- Invitations (single-use codes)
- Activities (append-only audit log)

Revision ID: 3f2c9d41a7b0
Revises:
Create Date: 2026-10-19 09:12:44.318205

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3f2c9d41a7b0"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _id_column() -> sa.Column:
    return sa.Column(
        "id",
        sa.UUID(),
        server_default=sa.text("gen_random_uuid()"),
        nullable=False,
    )


def _timestamp_column(name: str) -> sa.Column:
    return sa.Column(
        name,
        sa.TIMESTAMP(timezone=True),
        nullable=False,
        server_default=sa.text("NOW()"),
    )


def upgrade() -> None:
    """Upgrade schema."""
    # gen_random_uuid() is built in from PostgreSQL 13; older servers need it
    op.execute('CREATE EXTENSION IF NOT EXISTS "pgcrypto"')

    # ========================================================================
    # USERS table (team FK added once teams exists)
    # ========================================================================
    op.create_table(
        "users",
        _id_column(),
        sa.Column("external_id", sa.String(255), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),  # Lowercased
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("role", sa.String(20), nullable=False, server_default="MEMBER"),
        sa.Column("team_id", sa.UUID(), nullable=True),
        _timestamp_column("created_at"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("external_id", name="uq_users_external_id"),
        sa.UniqueConstraint("email", name="uq_users_email"),
        sa.CheckConstraint(
            "role IN ('ADMIN', 'MANAGER', 'MEMBER')", name="ck_users_role"
        ),
    )
    op.create_index("idx_users_team_id", "users", ["team_id"])

    # ========================================================================
    # TEAMS table
    # ========================================================================
    op.create_table(
        "teams",
        _id_column(),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("description", sa.Text(), nullable=False, server_default=""),
        sa.Column("admin_id", sa.UUID(), nullable=False),
        sa.Column("is_default", sa.Boolean(), nullable=False, server_default="false"),
        _timestamp_column("created_at"),
        sa.ForeignKeyConstraint(["admin_id"], ["users.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    # At most one team carries the default flag
    op.create_index(
        "uq_teams_single_default",
        "teams",
        ["is_default"],
        unique=True,
        postgresql_where=sa.text("is_default"),
    )

    op.create_foreign_key(
        "fk_users_team_id",
        "users",
        "teams",
        ["team_id"],
        ["id"],
        ondelete="SET NULL",
    )

    # ========================================================================
    # TEAM_MEMBERS table (ordered membership set)
    # ========================================================================
    op.create_table(
        "team_members",
        sa.Column("team_id", sa.UUID(), nullable=False),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column(
            "joined_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("clock_timestamp()"),
        ),
        sa.ForeignKeyConstraint(["team_id"], ["teams.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.UniqueConstraint("team_id", "user_id", name="uq_team_member"),
    )
    op.create_index(
        "idx_team_members_order", "team_members", ["team_id", "joined_at"]
    )

    # ========================================================================
    # PROJECTS table
    # ========================================================================
    op.create_table(
        "projects",
        _id_column(),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("description", sa.Text(), nullable=False, server_default=""),
        sa.Column("status", sa.String(20), nullable=False, server_default="active"),
        sa.Column("team_id", sa.UUID(), nullable=False),
        sa.Column("created_by", sa.UUID(), nullable=False),
        _timestamp_column("created_at"),
        _timestamp_column("updated_at"),
        sa.ForeignKeyConstraint(["team_id"], ["teams.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["created_by"], ["users.id"]),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "status IN ('active', 'in-progress', 'completed', 'on-hold')",
            name="ck_projects_status",
        ),
    )
    op.create_index(
        "idx_projects_team_created", "projects", ["team_id", "created_at"]
    )

    # ========================================================================
    # TASKS table
    # ========================================================================
    op.create_table(
        "tasks",
        _id_column(),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("description", sa.Text(), nullable=False, server_default=""),
        sa.Column("status", sa.String(20), nullable=False, server_default="todo"),
        sa.Column("project_id", sa.UUID(), nullable=False),
        sa.Column("assigned_to", sa.UUID(), nullable=True),
        _timestamp_column("created_at"),
        _timestamp_column("updated_at"),
        sa.ForeignKeyConstraint(["project_id"], ["projects.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["assigned_to"], ["users.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "status IN ('todo', 'in-progress', 'done')", name="ck_tasks_status"
        ),
    )
    op.create_index("idx_tasks_project", "tasks", ["project_id"])
    op.create_index("idx_tasks_assigned_to", "tasks", ["assigned_to"])

    # ========================================================================
    # MESSAGES table (append-only)
    # ========================================================================
    op.create_table(
        "messages",
        _id_column(),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("sender_id", sa.UUID(), nullable=False),
        sa.Column("team_id", sa.UUID(), nullable=False),
        _timestamp_column("created_at"),
        sa.ForeignKeyConstraint(["sender_id"], ["users.id"]),
        sa.ForeignKeyConstraint(["team_id"], ["teams.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_messages_team_created", "messages", ["team_id", "created_at"]
    )

    # ========================================================================
    # INVITATIONS table
    # ========================================================================
    op.create_table(
        "invitations",
        _id_column(),
        sa.Column("code", sa.String(128), nullable=False),
        sa.Column("team_id", sa.UUID(), nullable=False),
        sa.Column("created_by", sa.UUID(), nullable=False),
        sa.Column("email", sa.String(255), nullable=True),
        sa.Column("role", sa.String(20), nullable=False, server_default="MEMBER"),
        sa.Column("used", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("used_by", sa.UUID(), nullable=True),
        sa.Column("expires_at", sa.TIMESTAMP(timezone=True), nullable=False),
        _timestamp_column("created_at"),
        sa.ForeignKeyConstraint(["team_id"], ["teams.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["created_by"], ["users.id"]),
        sa.ForeignKeyConstraint(["used_by"], ["users.id"]),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("code", name="uq_invitations_code"),
    )
    op.create_index(
        "idx_invitations_team_created", "invitations", ["team_id", "created_at"]
    )

    # ========================================================================
    # ACTIVITIES table (append-only audit log)
    # ========================================================================
    op.create_table(
        "activities",
        _id_column(),
        sa.Column("type", sa.String(50), nullable=False),
        sa.Column("description", sa.String(500), nullable=False),
        sa.Column("actor_id", sa.UUID(), nullable=False),
        sa.Column("team_id", sa.UUID(), nullable=False),
        sa.Column("entity_id", sa.UUID(), nullable=True),
        sa.Column("entity_type", sa.String(20), nullable=True),
        sa.Column(
            "metadata",
            postgresql.JSONB(),
            nullable=False,
            server_default=sa.text("'{}'::jsonb"),
        ),
        _timestamp_column("created_at"),
        sa.ForeignKeyConstraint(["actor_id"], ["users.id"]),
        sa.ForeignKeyConstraint(["team_id"], ["teams.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_activities_team_created", "activities", ["team_id", "created_at"]
    )
    op.create_index(
        "idx_activities_actor_created", "activities", ["actor_id", "created_at"]
    )


def downgrade() -> None:
    """Downgrade schema."""
    # Drop tables (in reverse order of dependencies)
    op.drop_table("activities")
    op.drop_table("invitations")
    op.drop_table("messages")
    op.drop_table("tasks")
    op.drop_table("projects")
    op.drop_table("team_members")
    op.drop_constraint("fk_users_team_id", "users", type_="foreignkey")
    op.drop_table("teams")
    op.drop_table("users")
