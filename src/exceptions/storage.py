class DuplicateEntryError(Exception):
    """
    Raised when an insert collides with a unique constraint.

    The storage layer lets the database decide, so two concurrent identical
    inserts cannot both succeed.
    """

    def __init__(self, entity: str, message: str | None = None):
        self.entity = entity
        if message is None:
            message = f"{entity} already exists."
        super().__init__(message)
