import time
import logging
import requests
from typing import Any, Dict, Optional

from ..exceptions import AwinAPIError

logger = logging.getLogger(__name__)

USER_AGENT = "awin-api-python/1.0"


def new_session(auth_token: str) -> requests.Session:
    """Create a new requests session carrying the bearer token"""
    session = requests.Session()

    # Set default headers
    session.headers.update(
        {
            "User-Agent": USER_AGENT,
            "Accept": "application/json",
            "Authorization": f"Bearer {auth_token}",
        }
    )

    return session


def _parse_body(response: requests.Response) -> Any:
    """Decode a JSON body, returning None for an empty body"""
    if not response.content or not response.content.strip():
        return None
    return response.json()


def _error_description(response: requests.Response) -> Optional[str]:
    try:
        body = _parse_body(response)
    except ValueError:
        return None
    if isinstance(body, dict) and body.get("description"):
        return str(body["description"])
    return None


def get_json(
    session: requests.Session,
    url: str,
    params: Optional[Dict[str, Any]] = None,
    timeout: float = 10,
) -> Any:
    """Issue a single GET and return the decoded JSON body.

    Args:
        session: HTTP session to use (carries auth headers)
        url: URL to fetch
        params: Optional query parameters
        timeout: Request timeout in seconds

    Returns:
        Parsed JSON body, or None when the body is empty

    Raises:
        AwinAPIError: On an error status from the API
        requests.RequestException: On network failures
        ValueError: On a non-JSON success body
    """
    start = time.time()
    response = session.get(url, params=params, timeout=timeout)
    logger.debug(
        f"GET {url} params={params} -> {response.status_code} "
        f"in {time.time() - start:.2f} seconds"
    )

    if response.status_code >= 400:
        description = _error_description(response)
        if description:
            raise AwinAPIError(
                f"API Error: {description}",
                status_code=response.status_code,
                description=description,
            )
        raise AwinAPIError("Invalid data", status_code=response.status_code)

    try:
        return _parse_body(response)
    except ValueError as e:
        raise ValueError(f"Invalid JSON response from {url}: {str(e)}") from e
