"""Query parameters for the Bybit endpoints."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class AnnouncementParams:
    """Parameters for the announcements endpoint."""

    locale: str
    type_key: str | None = None
    tag: str | None = None
    page: int | None = None
    limit: int | None = None

    def to_query(self) -> list[tuple[str, str]]:
        """Return the query pairs in the order the API receives them."""
        query = [("locale", self.locale)]
        optional = (
            ("type", self.type_key),
            ("tag", self.tag),
            ("page", self.page),
            ("limit", self.limit),
        )
        query.extend((key, str(value)) for key, value in optional if value is not None)
        return query


@dataclass
class KlineParams:
    """Parameters for the kline (candlestick) endpoint."""

    symbol: str
    interval: str
    category: str | None = None
    start: int | None = None
    end: int | None = None
    limit: int | None = None

    def to_query(self) -> list[tuple[str, str]]:
        """Return the query pairs in the order the API receives them."""
        query: list[tuple[str, str]] = []
        if self.category is not None:
            query.append(("category", self.category))
        query.append(("symbol", self.symbol))
        query.append(("interval", self.interval))
        optional = (("start", self.start), ("end", self.end), ("limit", self.limit))
        query.extend((key, str(value)) for key, value in optional if value is not None)
        return query


@dataclass
class SystemStatusParams:
    """Parameters for the system status endpoint; all are optional."""

    id: str | None = None
    state: str | None = None

    def to_query(self) -> list[tuple[str, str]]:
        """Return the query pairs in the order the API receives them."""
        pairs = (("id", self.id), ("state", self.state))
        return [(key, value) for key, value in pairs if value is not None]