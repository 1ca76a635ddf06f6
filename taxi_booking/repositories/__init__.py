"""Persistence layer."""

from taxi_booking.repositories.entity_store import EntityStore, StoreConflict

__all__ = ["EntityStore", "StoreConflict"]
