import psycopg2
from psycopg2.extras import RealDictCursor
from contextlib import contextmanager
from turfzone.config import get_db_config

@contextmanager
def get_db():
    """Get a database connection with automatic commit/rollback."""
    config = get_db_config()
    conn = psycopg2.connect(
        host=config["host"],
        port=config["port"],
        database=config["database"],
        user=config["user"],
        password=config["password"],
        cursor_factory=RealDictCursor
    )
    try:
        yield conn
        conn.commit()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def init_db():
    """Initialize database schema."""
    with get_db() as conn:
        cursor = conn.cursor()

        cursor.execute("""
            CREATE TABLE IF NOT EXISTS turfs (
                id SERIAL PRIMARY KEY,
                name TEXT NOT NULL,
                address TEXT NOT NULL,
                hourly_rate NUMERIC(10, 2) NOT NULL CHECK (hourly_rate >= 0),
                operating_hours TEXT NOT NULL,
                category TEXT NOT NULL
            )
        """)

        cursor.execute("CREATE INDEX IF NOT EXISTS idx_turfs_category ON turfs (category)")

        conn.commit()


if __name__ == "__main__":
    init_db()
    print("Database initialized successfully")
