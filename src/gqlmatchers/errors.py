"""Exceptions raised for schema and configuration faults.

Conformance failures are never raised; they are collected as mismatch records.
"""


class GqlMatchersError(Exception):
    """Base exception for gqlmatchers errors."""


class ConfigurationError(GqlMatchersError, ValueError):
    """The schema in use cannot be checked with the current tables."""


class UnknownScalarKindError(ConfigurationError):
    """A scalar type has no entry in the compatibility table."""


class UnknownMismatchKindError(ConfigurationError):
    """A mismatch record has no message template."""


class SchemaError(GqlMatchersError, ValueError):
    """A schema declaration or type expression is invalid."""
