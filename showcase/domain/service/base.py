"""Base service class for domain services."""


class Service:
    """Marker base for domain services.

    Services hold the rules that involve more than one entity or that
    need a repository: handle allocation, view counting, session checks.
    """
