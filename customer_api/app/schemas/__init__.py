"""
Pydantic schema definitions for API payloads.

The Customer model doubles as the stored record: the in‑memory store
keeps ``Customer`` instances and hands the same instances back to the
API layer.
"""
