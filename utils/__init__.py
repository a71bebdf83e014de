"""
utils/ - Shared Helpers
=======================
Logging setup and file helpers used across layers.
"""
