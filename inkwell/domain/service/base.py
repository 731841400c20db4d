"""Domain service base class."""


class Service:
    """Marker base for domain services.

    Services hold the comment rules that span more than one entity, such as
    resolving a reply's parent or cascading a delete down a thread.
    """
