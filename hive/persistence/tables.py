"""SQLAlchemy table definitions for Hive.

These table definitions are used with SQLAlchemy Core and manual mappers.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    Column,
    ForeignKey,
    Index,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
    text,
)
from sqlalchemy.dialects.postgresql import JSONB, TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True, server_default=text("gen_random_uuid()")),
    Column("external_id", String(255), nullable=False),  # Identity provider subject
    Column("email", String(255), nullable=False),  # Stored lowercased
    Column("name", String(100), nullable=False),
    Column("role", String(20), nullable=False, server_default="MEMBER"),
    Column(
        "team_id",
        UUID,
        ForeignKey(
            "teams.id", ondelete="SET NULL", use_alter=True, name="fk_users_team_id"
        ),
        nullable=True,
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default=text("NOW()")
    ),
    UniqueConstraint("external_id", name="uq_users_external_id"),
    UniqueConstraint("email", name="uq_users_email"),
)

Index("idx_users_team_id", users_table.c.team_id)

# ============================================================================
# TEAMS TABLE
# ============================================================================
teams_table = Table(
    "teams",
    metadata,
    Column("id", UUID, primary_key=True, server_default=text("gen_random_uuid()")),
    Column("name", String(100), nullable=False),
    Column("description", Text, nullable=False, server_default=""),
    Column("admin_id", UUID, ForeignKey("users.id"), nullable=False),
    Column("is_default", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default=text("NOW()")
    ),
)

# At most one default team
Index(
    "uq_teams_single_default",
    teams_table.c.is_default,
    unique=True,
    postgresql_where=teams_table.c.is_default,
)

# ============================================================================
# TEAM MEMBERS TABLE (ordered membership set)
# ============================================================================
team_members_table = Table(
    "team_members",
    metadata,
    Column(
        "team_id", UUID, ForeignKey("teams.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "joined_at",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=text("clock_timestamp()"),
    ),
    UniqueConstraint("team_id", "user_id", name="uq_team_member"),
)

Index(
    "idx_team_members_order", team_members_table.c.team_id, team_members_table.c.joined_at
)

# ============================================================================
# PROJECTS TABLE
# ============================================================================
projects_table = Table(
    "projects",
    metadata,
    Column("id", UUID, primary_key=True, server_default=text("gen_random_uuid()")),
    Column("name", String(100), nullable=False),
    Column("description", Text, nullable=False, server_default=""),
    Column("status", String(20), nullable=False, server_default="active"),
    Column(
        "team_id", UUID, ForeignKey("teams.id", ondelete="CASCADE"), nullable=False
    ),
    Column("created_by", UUID, ForeignKey("users.id"), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default=text("NOW()")
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default=text("NOW()")
    ),
)

Index("idx_projects_team_created", projects_table.c.team_id, projects_table.c.created_at)

# ============================================================================
# TASKS TABLE (team derived through project)
# ============================================================================
tasks_table = Table(
    "tasks",
    metadata,
    Column("id", UUID, primary_key=True, server_default=text("gen_random_uuid()")),
    Column("title", String(200), nullable=False),
    Column("description", Text, nullable=False, server_default=""),
    Column("status", String(20), nullable=False, server_default="todo"),
    Column(
        "project_id",
        UUID,
        ForeignKey("projects.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "assigned_to", UUID, ForeignKey("users.id", ondelete="SET NULL"), nullable=True
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default=text("NOW()")
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default=text("NOW()")
    ),
)

Index("idx_tasks_project", tasks_table.c.project_id)
Index("idx_tasks_assigned_to", tasks_table.c.assigned_to)

# ============================================================================
# MESSAGES TABLE (append-only)
# ============================================================================
messages_table = Table(
    "messages",
    metadata,
    Column("id", UUID, primary_key=True, server_default=text("gen_random_uuid()")),
    Column("content", Text, nullable=False),
    Column("sender_id", UUID, ForeignKey("users.id"), nullable=False),
    Column(
        "team_id", UUID, ForeignKey("teams.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default=text("NOW()")
    ),
)

Index("idx_messages_team_created", messages_table.c.team_id, messages_table.c.created_at)

# ============================================================================
# INVITATIONS TABLE
# ============================================================================
invitations_table = Table(
    "invitations",
    metadata,
    Column("id", UUID, primary_key=True, server_default=text("gen_random_uuid()")),
    Column("code", String(128), nullable=False),
    Column(
        "team_id", UUID, ForeignKey("teams.id", ondelete="CASCADE"), nullable=False
    ),
    Column("created_by", UUID, ForeignKey("users.id"), nullable=False),
    Column("email", String(255), nullable=True),
    Column("role", String(20), nullable=False, server_default="MEMBER"),
    Column("used", Boolean, nullable=False, server_default="false"),
    Column("used_by", UUID, ForeignKey("users.id"), nullable=True),
    Column("expires_at", TIMESTAMP(timezone=True), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default=text("NOW()")
    ),
    UniqueConstraint("code", name="uq_invitations_code"),
)

Index(
    "idx_invitations_team_created",
    invitations_table.c.team_id,
    invitations_table.c.created_at,
)

# ============================================================================
# ACTIVITIES TABLE (append-only audit log)
# ============================================================================
activities_table = Table(
    "activities",
    metadata,
    Column("id", UUID, primary_key=True, server_default=text("gen_random_uuid()")),
    Column("type", String(50), nullable=False),
    Column("description", String(500), nullable=False),
    Column("actor_id", UUID, ForeignKey("users.id"), nullable=False),
    Column(
        "team_id", UUID, ForeignKey("teams.id", ondelete="CASCADE"), nullable=False
    ),
    Column("entity_id", UUID, nullable=True),
    Column("entity_type", String(20), nullable=True),
    Column("metadata", JSONB, nullable=False, server_default=text("'{}'::jsonb")),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default=text("NOW()")
    ),
)

Index(
    "idx_activities_team_created",
    activities_table.c.team_id,
    activities_table.c.created_at,
)
Index(
    "idx_activities_actor_created",
    activities_table.c.actor_id,
    activities_table.c.created_at,
)
