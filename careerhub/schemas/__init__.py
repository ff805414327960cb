"""
Schemas module - resources, actors and the API contract.

Everything lives in schemas.py:
- Resource and actor models (what the stores hold)
- Request schemas (drafts, patches, filters)
- Response schemas (items, lists, notifications)
"""
