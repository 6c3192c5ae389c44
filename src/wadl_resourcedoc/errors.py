"""Errors raised while configuring or loading resource documentation."""


class ResourceDocError(Exception):
    """Base class for all wadl-resourcedoc errors."""


class ConfigurationError(ResourceDocError):
    """A generator was configured inconsistently (missing or conflicting sources)."""


class ResourceDocParseError(ResourceDocError):
    """A resourcedoc document could not be parsed."""
