from typing import Dict, NoReturn

from fastapi import status
from src.domain.result import Error


class ClientError(Exception):
    def __init__(self, base_error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        self.base_error = base_error
        self.status_code = status_code
        super().__init__(base_error.message)


class ServerError(Exception):
    def __init__(self, base_error: Error):
        self.base_error = base_error
        super().__init__(base_error.message)


def raise_for_error(error: Error, status_by_code: Dict[str, int]) -> NoReturn:
    """
    Raise the HTTP-facing exception for a use case error.

    Codes listed in `status_by_code` become a ClientError with that status;
    anything else is unexpected and becomes a ServerError (500).
    """
    status_code = status_by_code.get(error.code)
    if status_code is None:
        raise ServerError(error)
    raise ClientError(error, status_code=status_code)
