"""
Handle to a collection on the Milvus server.
"""


class Collection:
    """
    A name-bound reference to a remote collection.

    Handles are returned by ``create_collection`` and ``get_collection`` and
    share the stub (and so the channel) of the client that produced them.
    A handle caches nothing: the collection may be dropped on the server
    while the handle is still alive. Discarding a handle has no effect on
    the server.
    """

    def __init__(self, stub, name: str):
        self._stub = stub
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    def __eq__(self, other):
        if not isinstance(other, Collection):
            return NotImplemented
        return self._name == other._name and self._stub is other._stub

    def __hash__(self):
        return hash((self._name, id(self._stub)))

    def __repr__(self):
        return f"Collection(name={self._name!r})"
