"""Adapter layer errors."""


class AdapterError(Exception):
    """Base adapter error."""

    pass


class ApiClientError(AdapterError):
    """Call to the showcase API failed.

    `status_code` is None when the request never got a response.
    """

    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message)


class ApiNotFoundError(ApiClientError):
    """The API answered 404."""

    pass
