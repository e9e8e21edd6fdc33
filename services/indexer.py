"""Run one full index: traverse, classify and persist.

The database file is deleted up front so every run starts from an empty
schema.  The connection is owned by :func:`run_index` for the whole run and
is closed on every exit path; :func:`core.file_index_db.insert_files` makes
sure the insert transaction is either committed or rolled back.
"""

from __future__ import annotations

import logging
import os
from collections import Counter
from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict

from dateutil.tz import tzlocal

from core.categories import categorize_files
from core.file_index_db import create_schema, get_conn, insert_files, reset_database
from core.utils.iterfiles import check_root, enumerate_files

logger = logging.getLogger(__name__)


@dataclass
class IndexRun:
    root: str
    db_path: str
    file_count: int = 0
    category_counts: Dict[str, int] = field(default_factory=dict)
    started_at: str = ""
    finished_at: str = ""


def _now_iso() -> str:
    return datetime.now(tzlocal()).isoformat(timespec="seconds")


def run_index(root: str, db_path: str, strict_root: bool = False) -> IndexRun:
    """Index ``root`` into a fresh SQLite file at ``db_path``.

    With ``strict_root`` an invalid root raises
    :class:`core.errors.InvalidRootPathError` before the database is
    touched.  Otherwise it is logged like any other unreadable directory and
    the run finishes with an empty table.

    If schema creation or the insert fails, the database file is removed
    before the error propagates.
    """
    root = os.path.abspath(root)
    if strict_root:
        root = check_root(root)
    run = IndexRun(root=root, db_path=db_path, started_at=_now_iso())

    reset_database(db_path)
    conn = get_conn(db_path)
    try:
        create_schema(conn)
        files = enumerate_files(root)
        logger.debug("Enumerated %d files under %s", len(files), root)
        categorized = categorize_files(files)
        run.file_count = insert_files(conn, categorized)
    except BaseException:
        # a failed run leaves no database file behind
        conn.close()
        reset_database(db_path)
        raise
    finally:
        conn.close()

    run.category_counts = dict(Counter(f.category for f in categorized))
    run.finished_at = _now_iso()
    logger.info("Indexed %d files from %s into %s", run.file_count, root, db_path)
    return run
