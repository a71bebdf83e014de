"""
models/ - Domain Models
=======================
Plain dataclasses for the entities the app stores.
"""
