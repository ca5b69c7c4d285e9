"""
ORM models for the building back office: rooms and room types, tenants,
contracts, finance transactions, maintenance tickets, building settings and
staff users.

Importing this package ensures model classes are registered with the Base
metadata for Alembic and runtime usage.
"""

from .rooms import (  # noqa: F401
    Room,
    RoomType,
)
from .tenants import Tenant  # noqa: F401
from .contracts import Contract  # noqa: F401
from .finances import Transaction  # noqa: F401
from .maintenance import Maintenance  # noqa: F401
from .settings import BuildingSettings  # noqa: F401
from .security import User  # noqa: F401
