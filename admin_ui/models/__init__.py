from .page import Page, RecordSet
from .record import Record, humanize

__all__ = ["Page", "Record", "RecordSet", "humanize"]
