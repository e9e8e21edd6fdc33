from typing import Iterable

from core.models import CATEGORIES, OTHER, CategorizedFile, FileDescriptor

_BY_EXTENSION = {ext: cat for cat, exts in CATEGORIES.items() for ext in exts}

def detect_category(ext: str | None) -> str:
    return _BY_EXTENSION.get((ext or "").lower(), OTHER)

def categorize_files(files: Iterable[FileDescriptor]) -> list[CategorizedFile]:
    return [CategorizedFile(descriptor=f, category=detect_category(f.extension)) for f in files]
