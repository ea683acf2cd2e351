"""
Service layer.

Each service encapsulates the business logic for one domain and works
on the process‑wide ``GuideStore``.  Mutations run under the store lock
and end with ``PersistenceService.after_write``.
"""
