"""SQLAlchemy table definitions for FlowDeck.

They match the schema defined in Alembic migrations.
"""

from sqlalchemy import BigInteger, Column, Index, MetaData, String, Table, Text, func
from sqlalchemy.dialects.postgresql import TIMESTAMP

metadata = MetaData()

users_table = Table(
    "users",
    metadata,
    Column("id", BigInteger, primary_key=True, autoincrement=True),
    Column("email", String(255), nullable=False),
    Column("full_name", String(255), nullable=False),
    Column("role", String(20), nullable=False, server_default="USER"),
    Column("google_sub", String(255), nullable=True),
    Column("google_refresh_token", Text, nullable=True),
    Column("google_calendar_refresh_token", Text, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# Emails are unique regardless of case
Index("uq_users_email_lower", func.lower(users_table.c.email), unique=True)
