import logging
import os
import sqlite3
from typing import Iterable

from core.errors import SchemaCreationError, TransactionCommitError
from core.models import CategorizedFile

logger = logging.getLogger(__name__)

CREATE_FILES_TABLE = """
CREATE TABLE Files (
  Id INTEGER PRIMARY KEY AUTOINCREMENT,
  FileName TEXT NOT NULL,
  FilePath TEXT NOT NULL,
  Size INTEGER NOT NULL,
  Extension TEXT NOT NULL,
  Category TEXT NOT NULL
)
"""

INSERT_FILE = (
    "INSERT INTO Files (FileName, FilePath, Size, Extension, Category) "
    "VALUES (?, ?, ?, ?, ?)"
)

def reset_database(db_path: str) -> None:
    if os.path.exists(db_path):
        os.remove(db_path)
        logger.debug("Removed previous index %s", db_path)

def get_conn(db_path: str) -> sqlite3.Connection:
    # transactions are opened and closed explicitly in insert_files
    return sqlite3.connect(db_path, isolation_level=None)

def create_schema(conn: sqlite3.Connection) -> None:
    try:
        conn.execute(CREATE_FILES_TABLE)
    except sqlite3.Error as e:
        raise SchemaCreationError(f"could not create Files table: {e}") from e

def insert_files(conn: sqlite3.Connection, files: Iterable[CategorizedFile]) -> int:
    """Insert every file in one transaction; nothing is kept if any row fails."""
    rows = [(f.name, f.full_path, f.size_bytes, f.extension, f.category) for f in files]
    cur = conn.cursor()
    try:
        cur.execute("BEGIN")
        cur.executemany(INSERT_FILE, rows)
        conn.commit()
    except sqlite3.Error as e:
        _rollback(conn)
        raise TransactionCommitError(f"insert of {len(rows)} files rolled back: {e}") from e
    except BaseException:
        _rollback(conn)
        raise
    finally:
        cur.close()
    return len(rows)

def _rollback(conn: sqlite3.Connection) -> None:
    if conn.in_transaction:
        conn.rollback()

def read_index(db_path: str) -> list[dict]:
    conn = get_conn(db_path)
    conn.row_factory = sqlite3.Row
    try:
        cur = conn.execute("SELECT * FROM Files ORDER BY Id")
        return [dict(r) for r in cur.fetchall()]
    finally:
        conn.close()
