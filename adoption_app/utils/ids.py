import uuid


class IdentifierGenerator:
    """Produces record ids. The default factory yields UUID4 strings."""

    def __init__(self, factory=None):
        self._factory = factory or (lambda: str(uuid.uuid4()))

    def __call__(self):
        return self._factory()
