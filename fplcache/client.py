"""FPL API client built on requests."""

import logging
from typing import Any, Optional

import requests
from pydantic import TypeAdapter

from .config import PipelineConfig
from .constants import FPL_BASE_URL, REQUEST_HEADERS, REQUEST_TIMEOUT_MS
from .schemas import RawBootstrap, RawEntry, RawFixture, RawPicks

logger = logging.getLogger('fplcache.client')

_FIXTURE_LIST = TypeAdapter(list[RawFixture])


class RemoteError(Exception):
    """
    A request to the FPL API failed.

    ``status`` is the HTTP status code, or None when no usable response came
    back (timeout, connection failure, body that isn't JSON).
    """

    def __init__(self, url: str, status: Optional[int] = None, reason: str = ''):
        self.url = url
        self.status = status
        self.reason = reason
        if status is not None and not reason:
            message = f'HTTP {status} - {url}'
        elif status is not None:
            message = f'HTTP {status} ({reason}) - {url}'
        else:
            message = f'{reason or "request failed"} - {url}'
        super().__init__(message)


class FPLClient:
    """
    Thin wrapper over the public FPL endpoints.

    Each call is a single attempt: any failure raises RemoteError and it is
    up to the caller to decide whether that is fatal.
    """

    def __init__(
        self,
        base_url: str = FPL_BASE_URL,
        timeout: float = REQUEST_TIMEOUT_MS / 1000,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.session = session or requests.Session()

    @classmethod
    def from_config(cls, config: PipelineConfig, session: Optional[requests.Session] = None) -> 'FPLClient':
        return cls(base_url=config.base_url, timeout=config.request_timeout, session=session)

    def close(self) -> None:
        self.session.close()

    def fetch_json(self, path: str) -> Any:
        """
        GET ``path`` relative to the API root and decode the JSON body.

        Args:
            path: Endpoint path, e.g. "/bootstrap-static/"

        Raises:
            RemoteError: On timeout, transport failure, non-2xx status or
                a body that isn't valid JSON
        """
        url = f'{self.base_url}{path}'
        logger.debug(f'GET {url}')

        try:
            response = self.session.get(url, headers=REQUEST_HEADERS, timeout=self.timeout)
        except requests.Timeout as e:
            raise RemoteError(url, reason=f'timed out after {self.timeout:g}s') from e
        except requests.RequestException as e:
            raise RemoteError(url, reason=str(e)) from e

        if not response.ok:
            raise RemoteError(url, status=response.status_code)

        try:
            return response.json()
        except ValueError as e:
            raise RemoteError(url, status=response.status_code, reason='invalid JSON') from e

    def get_bootstrap(self) -> RawBootstrap:
        """Players, clubs and gameweeks."""
        return RawBootstrap.model_validate(self.fetch_json('/bootstrap-static/'))

    def get_fixtures(self) -> list[RawFixture]:
        """Every fixture of the season, in provider order."""
        return _FIXTURE_LIST.validate_python(self.fetch_json('/fixtures/'))

    def get_entry(self, entry_id: str) -> RawEntry:
        return RawEntry.model_validate(self.fetch_json(f'/entry/{entry_id}/'))

    def get_picks(self, entry_id: str, gw: Optional[int]) -> RawPicks:
        return RawPicks.model_validate(self.fetch_json(f'/entry/{entry_id}/event/{gw}/picks/'))
