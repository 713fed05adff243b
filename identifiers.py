import uuid


class IdGenerator:
    """Mints opaque record identifiers."""

    def generate(self) -> str:
        return str(uuid.uuid4())
