"""HTTP utilities for the space explorer dashboard.

Provides:
- Session management with connection pooling
- A single place to set default request headers

The catalogue is fetched once per application lifecycle, so sessions here
are configured without automatic retries.
"""

from typing import Optional

import requests
from requests.adapters import HTTPAdapter

USER_AGENT = "space-explorer-dashboard/1.0"


class SessionManager:
    """Manages an HTTP session with connection pooling and no retries."""

    def __init__(self, pool_connections: int = 1, pool_maxsize: int = 4,
                 user_agent: str = USER_AGENT):
        """Initialize session manager.

        Args:
            pool_connections: Number of connection pools to cache
            pool_maxsize: Maximum number of connections per pool
            user_agent: User-Agent header sent with every request
        """
        self.pool_connections = pool_connections
        self.pool_maxsize = pool_maxsize
        self.user_agent = user_agent
        self._session: Optional[requests.Session] = None

    @property
    def session(self) -> requests.Session:
        """Get or create the HTTP session.

        Returns:
            requests.Session object
        """
        if self._session is None:
            self._session = requests.Session()
            self._session.headers["User-Agent"] = self.user_agent
            self._session.headers["Accept"] = "application/json"

            adapter = HTTPAdapter(
                max_retries=0,
                pool_connections=self.pool_connections,
                pool_maxsize=self.pool_maxsize
            )
            self._session.mount("http://", adapter)
            self._session.mount("https://", adapter)

        return self._session

    def close(self) -> None:
        """Close the session and release resources."""
        if self._session:
            self._session.close()
            self._session = None

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
