"""Utility layer errors."""


class UtilError(Exception):
    """Base utility error."""


class ConfigurationError(UtilError):
    """Settings are unusable in the current environment."""


class DependencyInjectionError(UtilError):
    """No provider implementation matches the request."""
