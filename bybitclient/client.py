"""HTTP client for the public Bybit v5 endpoints."""

from __future__ import annotations

import json
from collections.abc import Iterable
from typing import Any, Protocol, TypeVar

import requests

from .errors import ApiError, HttpError, JsonError, MissingFieldError
from .models import (
    AnnouncementResult,
    BybitResponse,
    KlineResult,
    MarketTimeResult,
    SystemStatusResult,
)
from .params import AnnouncementParams, KlineParams, SystemStatusParams

DEFAULT_BASE_URL = "https://api.bybit.com"


class _Model(Protocol):
    @classmethod
    def from_dict(cls, data: Any) -> Any: ...


_M = TypeVar("_M")


class BybitClient:
    """A small blocking client for Bybit's public REST API."""

    def __init__(self, base_url: str = DEFAULT_BASE_URL) -> None:
        self.base_url = base_url
        self._session = requests.Session()

    def __enter__(self) -> BybitClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self._session.close()

    def get_announcements(self, params: AnnouncementParams) -> AnnouncementResult:
        """Fetch a page of announcements."""
        return self._get("/v5/announcements/index", AnnouncementResult, params.to_query())

    def get_system_status(self, params: SystemStatusParams) -> SystemStatusResult:
        """Fetch system maintenance and incident notices."""
        return self._get("/v5/system/status", SystemStatusResult, params.to_query())

    def get_market_time(self) -> MarketTimeResult:
        """Fetch the exchange server time."""
        return self._get("/v5/market/time", MarketTimeResult)

    def get_kline(self, params: KlineParams) -> KlineResult:
        """Fetch candlestick data."""
        return self._get("/v5/market/kline", KlineResult, params.to_query())

    def _get(self, path: str, model: type[_M], query: Iterable[tuple[str, str]] = ()) -> _M:
        url = f"{self.base_url.rstrip('/')}{path}"
        try:
            response = self._session.get(url, params=list(query))
            response.raise_for_status()
        except requests.RequestException as exc:
            raise HttpError(exc) from exc

        try:
            payload = json.loads(response.content)
        except ValueError as exc:
            raise JsonError(exc) from exc

        envelope = BybitResponse.from_dict(payload)
        result = None if envelope.result is None else model.from_dict(envelope.result)  # type: ignore[attr-defined]

        if envelope.ret_code != 0:
            raise ApiError(envelope.ret_code, envelope.ret_msg)
        if result is None:
            raise MissingFieldError("result")
        return result