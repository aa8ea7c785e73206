class PageError(Exception):
    """Base class for failures a page turns into view state."""


class FetchError(PageError):
    """A read failed or the requested row does not exist."""


class ValidationError(PageError):
    """One or more form fields are missing or malformed."""

    def __init__(self, field_errors: dict[str, str]):
        super().__init__(", ".join(field_errors.values()))
        self.field_errors = field_errors


class AuthRequired(PageError):
    """A write was attempted without a signed-in user."""


class WriteError(PageError):
    """The data store rejected an insert or upsert."""
