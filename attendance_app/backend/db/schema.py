import logging
import asyncpg

logger = logging.getLogger(__name__)

STUDENTS_TABLE = """
    CREATE TABLE IF NOT EXISTS students (
        id SERIAL PRIMARY KEY,
        name VARCHAR(255) NOT NULL,
        roll_no VARCHAR(50),
        created_at TIMESTAMPTZ NOT NULL DEFAULT NOW()
    );
"""

ATTENDANCE_TABLE = """
    CREATE TABLE IF NOT EXISTS attendance (
        id SERIAL PRIMARY KEY,
        student_id INTEGER NOT NULL REFERENCES students(id) ON DELETE CASCADE,
        date DATE NOT NULL,
        status VARCHAR(10) NOT NULL CHECK (status IN ('present', 'absent')),
        note TEXT,
        updated_at TIMESTAMPTZ NOT NULL DEFAULT NOW(),
        CONSTRAINT uniq_student_date UNIQUE (student_id, date)
    );
"""


async def ensure_schema(pool: asyncpg.Pool):
    """Creates the two tables if they do not exist yet. There is no migration step."""
    async with pool.acquire() as connection:
        async with connection.transaction():
            await connection.execute(STUDENTS_TABLE)
            await connection.execute(ATTENDANCE_TABLE)
    logger.info("Database tables ensured.")
