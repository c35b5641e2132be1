"""
Alembic Environment Configuration

Alembic runs this file for every migration command.

Key responsibilities:
1. Read the database URL from the application settings (not alembic.ini)
2. Register the User and Book models so autogenerate can see them
3. Run migrations offline (emit SQL) or online (live connection)

MIGRATION WORKFLOW:
===================
1. Change a model in catalog_api/models/
2. Run: alembic revision --autogenerate -m "description"
3. Review the new file in alembic/versions/
4. Run: alembic upgrade head

COMMANDS:
- alembic upgrade head                           # Apply all migrations
- alembic downgrade -1                           # Rollback one migration
- alembic history                                # Show migration history
"""

from logging.config import fileConfig

from sqlalchemy import engine_from_config, pool

from alembic import context

# =============================================================================
# IMPORT APPLICATION COMPONENTS
# =============================================================================
from catalog_api.config import get_settings

# Importing the models registers the users and books tables on Base.metadata
from catalog_api.database import Base
from catalog_api.models import Book, User  # noqa: F401 - needed for autogenerate

settings = get_settings()

# =============================================================================
# ALEMBIC CONFIGURATION
# =============================================================================
config = context.config

# DATABASE_URL from the environment wins over alembic.ini, so migrations
# always hit the same store as the running app
config.set_main_option("sqlalchemy.url", settings.database_url)

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

# =============================================================================
# METADATA FOR AUTOGENERATE
# =============================================================================
target_metadata = Base.metadata

# =============================================================================
# MIGRATION FUNCTIONS
# =============================================================================


def run_migrations_offline() -> None:
    """
    Run migrations in 'offline' mode.

    Emits the SQL instead of executing it, e.g. for a DBA to review:
        alembic upgrade head --sql > migration.sql
    """
    url = config.get_main_option("sqlalchemy.url")
    context.configure(
        url=url,
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        compare_type=True,
    )

    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    """
    Run migrations in 'online' mode against a live connection.

    On SQLite, batch mode is switched on: SQLite cannot ALTER most
    constraints in place, so Alembic copies the table instead.
    """
    connectable = engine_from_config(
        config.get_section(config.config_ini_section, {}),
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,  # Don't pool connections for migrations
    )

    with connectable.connect() as connection:
        context.configure(
            connection=connection,
            target_metadata=target_metadata,
            compare_type=True,
            render_as_batch=settings.is_sqlite,
        )

        with context.begin_transaction():
            context.run_migrations()


# =============================================================================
# RUN MIGRATIONS
# =============================================================================
if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
