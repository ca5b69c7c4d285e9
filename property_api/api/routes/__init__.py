"""
API route modules, one per back office area.

This package contains subrouters for:
- Rooms and room types
- Tenants and contracts
- Transactions (finance ledger)
- Maintenance tickets
- Building settings
- Users and auth (login, refresh, current user)
- Health

Routers are included from property_api.api.main under API_PREFIX.
"""
