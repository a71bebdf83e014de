"""
repositories/ - Data Access Layer
==================================
Each repository stores WiseSaying entities in one backend (JSON files,
memory or PostgreSQL) behind the same WiseSayingRepository interface.
"""
