"""Durable append-only record storage."""

from commentboard.store.record_store import JsonRecordStore

__all__ = ['JsonRecordStore']
