from fastapi import status
from authgate.libs.result import Error


class ClientError(Exception):
    def __init__(self, base_error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        self.base_error = base_error
        self.status_code = status_code
        super().__init__(base_error.message)


class ServerError(Exception):
    def __init__(self, base_error: Error):
        self.base_error = base_error
        super().__init__(base_error.message)


class UnsupportedBackendError(Exception):
    """Configured credential store backend does not exist.

    A wiring problem, reported at startup; never confused with a rejected
    request.
    """

    def __init__(self, backend: str):
        self.backend = backend
        super().__init__(f"Unsupported STORE_BACKEND: {backend!r}")


NOT_FOUND = Error("NOT_FOUND", "Resource Not Found")
