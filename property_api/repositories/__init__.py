"""
Repository layer for data access.

Repositories encapsulate SQLAlchemy queries (filters, substring search,
pagination) for each vertical. They return ``None`` on lookup misses and never
raise HTTP errors; services decide what a miss means.
"""
