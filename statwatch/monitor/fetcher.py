"""
HTTP fetcher for the server statistics endpoint.

One GET per tick through a reused requests session. Every failure mode
(connection error, timeout, non-200 answer) surfaces as FetchError.

Author: statwatch Team
SPDX-License-Identifier: BUSL-1.1
"""

import logging

import requests

from statwatch.errors import FetchError

logger = logging.getLogger(__name__)


class StatsFetcher:
    """
    Fetches the raw statistics line.

    Example:
        with StatsFetcher("http://host/_stats", timeout=5.0) as fetcher:
            body = fetcher.fetch()
    """

    def __init__(
        self,
        url: str,
        timeout: float = 5.0,
        session: requests.Session | None = None,
    ):
        self.url = url
        self.timeout = timeout
        self._session = session or requests.Session()
        self._session.headers.update({"Accept": "text/plain"})

    def fetch(self) -> str:
        """
        Issue a GET and return the response body.

        Raises:
            FetchError: on network failure, timeout or a status other than 200
        """
        logger.debug(f"GET {self.url} (timeout={self.timeout}s)")
        try:
            resp = self._session.get(self.url, timeout=self.timeout)
        except requests.Timeout as e:
            logger.warning(f"Request to {self.url} timed out after {self.timeout}s")
            raise FetchError(f"timed out after {self.timeout}s", self.url) from e
        except requests.RequestException as e:
            logger.warning(f"Request to {self.url} failed: {e}")
            raise FetchError(str(e), self.url) from e

        if resp.status_code != 200:
            logger.warning(f"Unexpected status {resp.status_code} from {self.url}")
            raise FetchError(
                f"invalid response status {resp.status_code}",
                self.url,
                status_code=resp.status_code,
            )

        return resp.text

    def close(self) -> None:
        self._session.close()

    def __enter__(self) -> "StatsFetcher":
        return self

    def __exit__(self, *exc) -> None:
        self.close()
