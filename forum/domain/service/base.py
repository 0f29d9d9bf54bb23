"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold forum rules that don't belong to a single item,
    such as permission windows and identity resolution.
    """

    pass
