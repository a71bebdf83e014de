"""
db/errors.py
------------
Exceptions raised by the SQL helper.
Every error keeps the driver's message and chains the original exception.
"""


class SimpleDbError(Exception):
    """Base class for all SQL helper failures."""


class DbConnectionError(SimpleDbError):
    """A physical connection could not be opened."""


class BindingError(SimpleDbError):
    """Parameters do not fit the statement's placeholders."""


class SqlExecutionError(SimpleDbError):
    """The driver failed while preparing or executing a statement."""


class NoGeneratedKeyError(SimpleDbError):
    """An INSERT asked for a generated key but none was produced."""


class MappingError(SimpleDbError):
    """A decoded row could not be projected onto the requested type."""


class TransactionError(SimpleDbError):
    """Begin, commit or rollback failed at the driver level."""
