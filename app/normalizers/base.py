# app/normalizers/base.py
from typing import Protocol
from .types import ClientBlogRecord, Record

class Normalizer(Protocol):
    def normalize_record(self, rec: Record) -> ClientBlogRecord:
        """Return a NEW canonical record. Do not mutate `rec`."""
        ...
