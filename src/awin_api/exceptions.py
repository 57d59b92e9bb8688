from typing import Optional

import requests


class AwinAPIError(requests.RequestException):
    """Raised when the Awin API answers with an error status"""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        description: Optional[str] = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.description = description


class AwinParseError(ValueError):
    """Raised when a response body does not match the expected schema"""


class AwinConfigError(ValueError):
    """Raised when client configuration is missing or malformed"""
