"""
Pydantic schema definitions.

The same models describe API payloads, the in‑memory records and the
persisted snapshot, so a record read back after a restart compares
equal to the one that was written.
"""
