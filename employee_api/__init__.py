"""
Employee API — Application Package
====================================

What: CRUD HTTP service over the `employee` table.
How:  Layered the same way throughout:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │       Services (SQL + mapping)      │  ← one statement per operation
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← table shape + API contracts
    ├─────────────────────────────────────┤
    │     Connection Pool (Persistence)   │  ← async SQLAlchemy engine
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
