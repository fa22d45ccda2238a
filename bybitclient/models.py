"""Typed views of the Bybit API's JSON payloads."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any, TypeVar

from .errors import JsonError

_T = TypeVar("_T")

_I32 = (-(2**31), 2**31 - 1)
_I64 = (-(2**63), 2**63 - 1)
_U64 = (0, 2**64 - 1)


def _mapping(data: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise JsonError(f"invalid type: expected {what}")
    return data


def _require(data: Mapping[str, Any], name: str) -> Any:
    try:
        return data[name]
    except KeyError:
        raise JsonError(f"missing field `{name}`") from None


def _as_str(value: Any, name: str) -> str:
    if not isinstance(value, str):
        raise JsonError(f"invalid type for `{name}`: expected a string")
    return value


def _as_int(value: Any, name: str, bounds: tuple[int, int]) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise JsonError(f"invalid type for `{name}`: expected an integer")
    low, high = bounds
    if not low <= value <= high:
        raise JsonError(f"integer out of range for `{name}`: {value}")
    return value


def _str(data: Mapping[str, Any], name: str) -> str:
    return _as_str(_require(data, name), name)


def _int(data: Mapping[str, Any], name: str, bounds: tuple[int, int]) -> int:
    return _as_int(_require(data, name), name, bounds)


def _opt_int(data: Mapping[str, Any], name: str) -> int | None:
    value = data.get(name)
    return None if value is None else _as_int(value, name, _I64)


def _opt_str(data: Mapping[str, Any], name: str) -> str | None:
    value = data.get(name)
    return None if value is None else _as_str(value, name)


def _list(data: Mapping[str, Any], name: str, item: Callable[[Any], _T]) -> list[_T]:
    value = _require(data, name)
    if not isinstance(value, list):
        raise JsonError(f"invalid type for `{name}`: expected a sequence")
    return [item(element) for element in value]


@dataclass(frozen=True)
class AnnouncementType:
    """The category an announcement belongs to."""

    title: str
    key: str

    @classmethod
    def from_dict(cls, data: Any) -> AnnouncementType:
        data = _mapping(data, "announcement type object")
        return cls(title=_str(data, "title"), key=_str(data, "key"))


@dataclass(frozen=True)
class Announcement:
    """A single announcement entry."""

    title: str
    description: str
    type_info: AnnouncementType
    tags: list[str]
    url: str
    date_timestamp: int | None = None
    start_date_timestamp: int | None = None
    end_date_timestamp: int | None = None
    publish_time: int | None = None

    @classmethod
    def from_dict(cls, data: Any) -> Announcement:
        data = _mapping(data, "announcement object")
        return cls(
            title=_str(data, "title"),
            description=_str(data, "description"),
            type_info=AnnouncementType.from_dict(_require(data, "type")),
            tags=_list(data, "tags", lambda v: _as_str(v, "tags")),
            url=_str(data, "url"),
            date_timestamp=_opt_int(data, "dateTimestamp"),
            start_date_timestamp=_opt_int(data, "startDateTimestamp"),
            end_date_timestamp=_opt_int(data, "endDateTimestamp"),
            publish_time=_opt_int(data, "publishTime"),
        )


@dataclass(frozen=True)
class AnnouncementResult:
    """A page of announcements together with the overall count."""

    total: int
    list: list[Announcement]

    @classmethod
    def from_dict(cls, data: Any) -> AnnouncementResult:
        data = _mapping(data, "announcement result object")
        return cls(
            total=_int(data, "total", _U64),
            list=_list(data, "list", Announcement.from_dict),
        )


@dataclass(frozen=True)
class SystemStatus:
    """A maintenance or incident notice for the platform."""

    id: str
    title: str
    state: str
    begin: str
    end: str
    href: str
    service_types: list[int]
    product: list[int]
    uid_suffix: list[int]
    maintain_type: int
    env: int

    @classmethod
    def from_dict(cls, data: Any) -> SystemStatus:
        data = _mapping(data, "system status object")

        def i32_list(name: str) -> list[int]:
            return _list(data, name, lambda v: _as_int(v, name, _I32))

        return cls(
            id=_str(data, "id"),
            title=_str(data, "title"),
            state=_str(data, "state"),
            begin=_str(data, "begin"),
            end=_str(data, "end"),
            href=_str(data, "href"),
            service_types=i32_list("serviceTypes"),
            product=i32_list("product"),
            uid_suffix=i32_list("uidSuffix"),
            maintain_type=_int(data, "maintainType", _I32),
            env=_int(data, "env", _I32),
        )


@dataclass(frozen=True)
class SystemStatusResult:
    """The list of system status entries."""

    list: list[SystemStatus]

    @classmethod
    def from_dict(cls, data: Any) -> SystemStatusResult:
        data = _mapping(data, "system status result object")
        return cls(list=_list(data, "list", SystemStatus.from_dict))


@dataclass(frozen=True)
class MarketTimeResult:
    """The exchange server time, as the strings the API returns."""

    time_second: str
    time_nano: str

    @classmethod
    def from_dict(cls, data: Any) -> MarketTimeResult:
        data = _mapping(data, "market time object")
        return cls(
            time_second=_str(data, "timeSecond"),
            time_nano=_str(data, "timeNano"),
        )


@dataclass(frozen=True)
class KlineResult:
    """Candlestick rows; each row is a list of string fields."""

    category: str | None
    symbol: str | None
    list: list[list[str]]

    @classmethod
    def from_dict(cls, data: Any) -> KlineResult:
        data = _mapping(data, "kline result object")

        def row(value: Any) -> list[str]:
            if not isinstance(value, list):
                raise JsonError("invalid type for `list`: expected a sequence")
            return [_as_str(field, "list") for field in value]

        return cls(
            category=_opt_str(data, "category"),
            symbol=_opt_str(data, "symbol"),
            list=_list(data, "list", row),
        )


@dataclass(frozen=True)
class BybitResponse:
    """The envelope around every API answer; ``result`` is left undecoded."""

    ret_code: int
    ret_msg: str
    result: Any = None

    @classmethod
    def from_dict(cls, data: Any) -> BybitResponse:
        data = _mapping(data, "response object")
        return cls(
            ret_code=_int(data, "retCode", _I32),
            ret_msg=_str(data, "retMsg"),
            result=data.get("result"),
        )