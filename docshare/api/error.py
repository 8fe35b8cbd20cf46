from typing import Dict

from fastapi import status

from docshare.libs.result import Error


class ClientError(Exception):
    def __init__(self, base_error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        self.base_error = base_error
        self.status_code = status_code
        super().__init__(base_error.message)


class ServerError(Exception):
    def __init__(self, base_error: Error):
        self.base_error = base_error
        super().__init__(base_error.message)


def raise_for_error(error: Error, status_by_code: Dict[str, int]):
    """Raise ClientError for a known business error code, ServerError otherwise"""
    if error.code in status_by_code:
        raise ClientError(error, status_code=status_by_code[error.code])
    raise ServerError(error)
