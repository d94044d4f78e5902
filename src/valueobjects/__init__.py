"""
valueobjects – immutable value objects with derivation.

Import path convention::

    from valueobjects.kernel.ddd import ValueObject, value_object
    from valueobjects.kernel.errors import MissingFieldsError
    from valueobjects.observability.logging import configure_logging
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
