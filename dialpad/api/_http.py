"""
Base HTTP client for the Dialpad API.

Handles session management, authentication headers and error handling.
"""

import logging
from typing import Optional, Dict, Any

import requests

from .. import __version__
from ..config import DialpadConfig, get_config
from ..exceptions import (
    APIError,
    AuthenticationError,
    NotFoundError,
    PermissionDeniedError,
    BadRequestError,
)

logger = logging.getLogger(__name__)


class HTTPClient:
    """
    Base HTTP client for the Dialpad API.

    Handles:
    - Session management
    - Authentication and company headers
    - Error response handling

    Requests are never retried; failures surface to the caller.
    """

    AUTH_HEADER = "Authorization"
    COMPANY_HEADER = "DP-Company-ID"

    def __init__(
        self,
        config: Optional[DialpadConfig] = None,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize the HTTP client.

        Args:
            config: Optional configuration. Read from the environment if not provided.
            session: Optional pre-built session (custom adapters, testing).
        """
        self.config = config or get_config()
        self._session = session
        if session is not None:
            self._prepare_session(session)

    def _prepare_session(self, session: requests.Session) -> None:
        session.headers.update({
            "User-Agent": f"dialpad-python/{__version__}",
            "Accept": "application/json",
        })
        if self.config.headers:
            session.headers.update(self.config.headers)
        if self.config.proxies:
            session.proxies.update(self.config.proxies)

    @property
    def session(self) -> requests.Session:
        """Get or create the HTTP session."""
        if self._session is None:
            self._session = requests.Session()
            self._prepare_session(self._session)
        return self._session

    @property
    def base_url(self) -> str:
        """Get the base URL for API requests."""
        return self.config.api_root + "/"

    def _get_headers(self) -> Dict[str, str]:
        """
        Get per-request headers.

        Evaluated for every request so a company ID changed after
        construction applies to the next call.
        """
        headers = {self.AUTH_HEADER: f"Bearer {self.config.token}"}

        if self.config.company_id is not None and self.config.company_id != "":
            headers[self.COMPANY_HEADER] = str(self.config.company_id)

        return headers

    def _handle_response(self, response: requests.Response) -> Any:
        """Decode a successful response or raise the matching exception."""
        logger.debug(f"Response: {response.status_code} {response.request.method} {response.url}")

        if response.ok:
            if response.status_code == 204 or not response.content:
                return {}
            try:
                return response.json()
            except ValueError:
                return {"content": response.text}

        try:
            error_data = response.json()
            if not isinstance(error_data, dict):
                error_data = {"data": error_data}
            error_msg = self._extract_error_message(error_data)
        except ValueError:
            error_msg = response.text or f"HTTP {response.status_code}"
            error_data = {}

        logger.warning(
            "API error [%s %s] status=%d: %s",
            response.request.method,
            response.url,
            response.status_code,
            error_msg,
        )

        kwargs = {
            "status_code": response.status_code,
            "response_data": error_data,
            "response": response,
        }
        if response.status_code == 401:
            raise AuthenticationError(
                "Authentication failed: " + (error_msg or "Please check your API token."),
                **kwargs
            )
        elif response.status_code == 403:
            raise PermissionDeniedError(
                "Permission denied: " + (error_msg or "You don't have access to this resource."),
                **kwargs
            )
        elif response.status_code == 404:
            raise NotFoundError(
                "Resource not found: " + (error_msg or "The requested resource does not exist."),
                **kwargs
            )
        elif response.status_code in (400, 422):
            raise BadRequestError(
                f"Invalid request: {error_msg}",
                details=error_data,
                **kwargs
            )
        else:
            raise APIError(f"API request failed: {error_msg}", **kwargs)

    def _extract_error_message(self, error_data: Dict[str, Any]) -> str:
        """Extract an error message from an API error body."""
        error = error_data.get("error")
        if isinstance(error, dict):
            message = error.get("message")
            if message:
                return str(message)
            errors = error.get("errors")
            if isinstance(errors, list) and errors:
                return "; ".join(
                    str(err.get("message", err)) if isinstance(err, dict) else str(err)
                    for err in errors
                )
        elif isinstance(error, str) and error:
            return error

        if error_data.get("message"):
            return str(error_data["message"])

        errors = error_data.get("errors")
        if isinstance(errors, list) and errors:
            return "; ".join(
                str(err.get("message", err)) if isinstance(err, dict) else str(err)
                for err in errors
            )

        return str(error_data)

    def request(
        self,
        method: str,
        endpoint: str,
        params: Optional[Dict[str, Any]] = None,
        json_data: Any = None,
    ) -> Any:
        """
        Make an API request.

        Args:
            method: HTTP method
            endpoint: API endpoint (relative to base URL)
            params: Query parameters
            json_data: JSON body data

        Returns:
            Decoded response body
        """
        url = self.base_url + endpoint
        headers = self._get_headers()

        if params:
            params = {k: v for k, v in params.items() if v is not None}

        logger.debug(f"Request: {method} {url} params={params}")

        try:
            response = self.session.request(
                method=method,
                url=url,
                params=params or None,
                json=json_data,
                headers=headers,
                timeout=self.config.timeout,
                verify=self.config.verify_ssl,
            )
        except requests.exceptions.ConnectionError as e:
            raise APIError(f"Connection failed: {e}") from e
        except requests.exceptions.Timeout as e:
            raise APIError(f"Request timed out: {e}") from e
        except requests.exceptions.RequestException as e:
            raise APIError(f"Request failed: {e}") from e

        return self._handle_response(response)

    def close(self) -> None:
        """Close the HTTP session."""
        if self._session:
            self._session.close()
            self._session = None

    def __enter__(self) -> "HTTPClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
