"""
Database
Async pool for the site's Supabase Postgres plus the SQLAlchemy metadata
used by Alembic
"""

from databases import Database
from sqlalchemy import MetaData
from sqlalchemy.orm import declarative_base
from highfive.config import settings

SUPABASE_POOLER_HOSTS = ("pooler.supabase.com", "supabase.com")


def pool_options(url: str) -> dict:
    """
    Connection pool settings for a database URL

    The Supabase pooler runs pgbouncer in transaction mode, which cannot
    hold prepared statements, so asyncpg's statement cache is turned off
    and the pool kept small there.
    """
    if any(host in url for host in SUPABASE_POOLER_HOSTS):
        return {"min_size": 1, "max_size": 5, "statement_cache_size": 0}
    return {"min_size": 1, "max_size": 10}


def sync_url(url: str) -> str:
    """psycopg2 URL for Alembic and one-off scripts"""
    if url.startswith("postgresql://"):
        return "postgresql+psycopg2://" + url[len("postgresql://"):]
    return url


database = Database(settings.DATABASE_URL, **pool_options(settings.DATABASE_URL))

metadata = MetaData()
Base = declarative_base(metadata=metadata)


async def connect_db():
    """Open the pool and check the connection"""
    await database.connect()
    await database.fetch_val("SELECT 1")
    print("[OK] Database connected")


async def disconnect_db():
    await database.disconnect()
    print("[OK] Database disconnected")
