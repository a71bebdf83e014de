"""
db/ - Database Layer
====================
Handles PostgreSQL connections (one per worker thread), parameter binding,
result decoding, transactions and schema initialization.
This layer is the lowest in the architecture and has no dependencies on other layers.
"""
