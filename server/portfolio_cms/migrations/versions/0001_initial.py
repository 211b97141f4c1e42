from __future__ import annotations
"""server/portfolio_cms/migrations/versions/0001_initial.py
~~~~~~~~~~~~~~~~~~~~~~~~
Schéma initial.
"""
from alembic import op
import sqlalchemy as sa

revision = "0001_initial"
down_revision = None
branch_labels = None
depends_on = None

SINGLE_OWNER_CHECK = (
    "(CASE WHEN exposition_id IS NULL THEN 0 ELSE 1 END"
    " + CASE WHEN section_travaux_id IS NULL THEN 0 ELSE 1 END"
    " + CASE WHEN section_about_id IS NULL THEN 0 ELSE 1 END"
    " + CASE WHEN about_id IS NULL THEN 0 ELSE 1 END) <= 1"
)


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("password_hash", sa.String(255), nullable=False),
        sa.Column("role", sa.String(32), server_default="admin", nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    op.create_index("ix_users_email", "users", ["email"], unique=True)

    op.create_table(
        "textes",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("subtitle", sa.String(255), nullable=False),
        sa.Column("content", sa.JSON(), nullable=False),
    )

    op.create_table(
        "expositions",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("subtitle", sa.String(255), nullable=False),
        sa.Column("content", sa.JSON(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )

    op.create_table(
        "travaux",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("subtitle", sa.String(255), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )

    op.create_table(
        "sections_travaux",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("content", sa.JSON(), nullable=False),
        sa.Column("section", sa.String(1), nullable=False),
        sa.Column("travaux_id", sa.Uuid(), nullable=True),
        sa.ForeignKeyConstraint(["travaux_id"], ["travaux.id"], ondelete="SET NULL"),
        sa.CheckConstraint("section IN ('1', '2', '3', '4')", name="ck_sections_travaux_section"),
    )
    op.create_index("ix_sections_travaux_travaux_id", "sections_travaux", ["travaux_id"], unique=False)

    op.create_table(
        "sections_about",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("type", sa.String(32), nullable=False),
        sa.Column("content", sa.JSON(), nullable=False),
    )

    op.create_table(
        "about",
        sa.Column("id", sa.Uuid(), primary_key=True),
    )

    op.create_table(
        "about_sections",
        sa.Column("about_id", sa.Uuid(), primary_key=True),
        sa.Column("section_about_id", sa.Uuid(), primary_key=True),
        sa.ForeignKeyConstraint(["about_id"], ["about.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["section_about_id"], ["sections_about.id"], ondelete="CASCADE"),
    )

    op.create_table(
        "images",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("file_id", sa.String(64), nullable=True),
        sa.Column("file_extension", sa.String(8), nullable=True),
        sa.Column("file_filesize", sa.Integer(), nullable=True),
        sa.Column("file_width", sa.Integer(), nullable=True),
        sa.Column("file_height", sa.Integer(), nullable=True),
        sa.Column("order", sa.Integer(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("exposition_id", sa.Uuid(), nullable=True),
        sa.Column("section_travaux_id", sa.Uuid(), nullable=True, unique=True),
        sa.Column("section_about_id", sa.Uuid(), nullable=True, unique=True),
        sa.Column("about_id", sa.Uuid(), nullable=True, unique=True),
        sa.ForeignKeyConstraint(["exposition_id"], ["expositions.id"], ondelete="SET NULL"),
        sa.ForeignKeyConstraint(["section_travaux_id"], ["sections_travaux.id"], ondelete="SET NULL"),
        sa.ForeignKeyConstraint(["section_about_id"], ["sections_about.id"], ondelete="SET NULL"),
        sa.ForeignKeyConstraint(["about_id"], ["about.id"], ondelete="SET NULL"),
        sa.CheckConstraint(SINGLE_OWNER_CHECK, name="ck_images_single_owner"),
        sa.CheckConstraint('"order" IS NULL OR "order" >= 1', name="ck_images_order_min"),
    )
    op.create_index("ix_images_exposition_id", "images", ["exposition_id"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_images_exposition_id", table_name="images")
    op.drop_table("images")
    op.drop_table("about_sections")
    op.drop_table("about")
    op.drop_table("sections_about")
    op.drop_index("ix_sections_travaux_travaux_id", table_name="sections_travaux")
    op.drop_table("sections_travaux")
    op.drop_table("travaux")
    op.drop_table("expositions")
    op.drop_table("textes")
    op.drop_index("ix_users_email", table_name="users")
    op.drop_table("users")
