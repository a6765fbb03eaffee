"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold the rules that span repositories; they never touch
    sessions or transactions directly.
    """

    pass
