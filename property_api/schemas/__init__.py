"""
Public Pydantic schemas used by FastAPI routes, services, and tests.

Schemas are grouped by vertical (rooms, tenants, contracts, ...) and also
include common reusable models such as the pagination envelope and standard
responses.
"""

from .common import MessageResponse, Page, PageMeta  # noqa: F401
