"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold the rules that span an aggregate and its
    collaborators: the game writer, the user store and the notifier.
    """

    pass
