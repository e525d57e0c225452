import sqlite3
from contextlib import contextmanager
import logging
from workhours.core.config import ServerConfig

logger = logging.getLogger(__name__)

@contextmanager
def get_db():
    conn = sqlite3.connect(ServerConfig.DATABASE_PATH)
    conn.row_factory = sqlite3.Row
    try:
        yield conn
    except Exception as e:
        conn.rollback()
        raise e
    finally:
        conn.close()

def init_database():
    with get_db() as conn:
        cursor = conn.cursor()

        # Projects are owned by the account; read-only for this service
        cursor.execute('''
            CREATE TABLE IF NOT EXISTS projects (
                project_id TEXT NOT NULL,
                account_id TEXT NOT NULL,
                name TEXT NOT NULL,
                code TEXT NOT NULL DEFAULT '',
                PRIMARY KEY (account_id, project_id)
            )
        ''')

        # Shift records; hour_classification is JSON text
        cursor.execute('''
            CREATE TABLE IF NOT EXISTS shift_records (
                record_id INTEGER PRIMARY KEY AUTOINCREMENT,
                account_id TEXT NOT NULL,
                work_date TEXT NOT NULL,
                start_time TEXT NOT NULL,
                end_time TEXT NOT NULL,
                break_minutes INTEGER NOT NULL DEFAULT 0 CHECK(break_minutes >= 0),
                project_id TEXT NOT NULL,
                hourly_rate REAL,
                notes TEXT NOT NULL DEFAULT '',
                colleagues TEXT NOT NULL DEFAULT '',
                task_description TEXT NOT NULL DEFAULT '',
                hours_worked REAL NOT NULL,
                hour_classification TEXT NOT NULL,
                created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
            )
        ''')

        # Create index for history queries
        cursor.execute('''
            CREATE INDEX IF NOT EXISTS idx_shift_history
            ON shift_records (account_id, work_date)
        ''')

        conn.commit()
        logger.info("Database initialized successfully")

def seed_test_data():
    """Add test projects for development/testing"""
    with get_db() as conn:
        cursor = conn.cursor()

        # Check if we already have projects
        cursor.execute("SELECT COUNT(*) FROM projects")
        count = cursor.fetchone()[0]

        if count > 0:
            logger.info(f"Database already has {count} projects")
            return

        test_projects = [
            ("proj-1", "demo", "Warehouse", "WH-01"),
            ("proj-2", "demo", "Retail Floor", "RF-02"),
            ("proj-3", "demo", "Night Logistics", "NL-03"),
        ]

        cursor.executemany('''
            INSERT INTO projects (project_id, account_id, name, code)
            VALUES (?, ?, ?, ?)
        ''', test_projects)

        conn.commit()
        logger.info(f"Added {len(test_projects)} test projects to database")
