from .records import InMemoryRecordSource, RecordSource, sample_record_source

__all__ = ["InMemoryRecordSource", "RecordSource", "sample_record_source"]
