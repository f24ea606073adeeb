"""
Data type specific exception classes.
"""


class DataTypeError(Exception):
    """Base class for all dialect_types errors.
    """


class UnknownTypeError(DataTypeError, KeyError):
    """Abstract type name not known to the registry.
    """

    def __str__(self) -> str:
        # KeyError repr()s its message otherwise
        return str(self.args[0]) if self.args else ''


class UnknownDialectError(DataTypeError, ValueError):
    """Dialect name not registered.
    """


class ValidationError(DataTypeError, ValueError):
    """Error in type constructor input.
    """
