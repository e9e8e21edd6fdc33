from dataclasses import dataclass

OTHER = "Other"

CATEGORIES = {
    "Picture": [".jpg", ".jpeg", ".png", ".gif", ".bmp"],
    "Word Document": [".doc", ".docx"],
    "Excel Document": [".xls", ".xlsx"],
    "PDF Document": [".pdf"],
}

CATEGORY_NAMES = tuple(CATEGORIES) + (OTHER,)

@dataclass(frozen=True)
class FileDescriptor:
    name: str
    full_path: str
    size_bytes: int
    extension: str

@dataclass(frozen=True)
class CategorizedFile:
    descriptor: FileDescriptor
    category: str

    @property
    def name(self) -> str:
        return self.descriptor.name

    @property
    def full_path(self) -> str:
        return self.descriptor.full_path

    @property
    def size_bytes(self) -> int:
        return self.descriptor.size_bytes

    @property
    def extension(self) -> str:
        return self.descriptor.extension
