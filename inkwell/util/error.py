"""Errors raised by the utility layer."""


class DependencyInjectionError(Exception):
    """No provider implementation matches the requested mock/production kind."""
