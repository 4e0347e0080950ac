"""pgurl.params
Turns a decoded connection URL into the parameters needed to open a connection.
"""

import dataclasses
import datetime
import enum
import logging
import pathlib

from typing import Self

from .config import ConnectSettings, get_settings
from .errors import DecodeError
from .parse import Query, Url, decode_component, parse_url

logger = logging.getLogger(__name__)


class UrlParseErrorKind(enum.Enum):
    INVALID_CONNECTION_TIMEOUT = "invalid connection timeout"
    INVALID_KEEPALIVE = "invalid keepalive"
    DECODE = "decode"


class UrlParseError(ValueError):
    """Raised when a URL cannot be turned into connection parameters.
    DECODE errors are chained from the DecodeError that caused them.
    """

    def __init__(self: Self, kind: UrlParseErrorKind, message: str | None = None) -> None:
        super().__init__(message or kind.value)
        self.kind: UrlParseErrorKind = kind

    @classmethod
    def from_decode_error(cls: type[Self], exc: DecodeError) -> Self:
        return cls(UrlParseErrorKind.DECODE, str(exc))


@dataclasses.dataclass(frozen=True)
class TcpHost:
    name: str


@dataclasses.dataclass(frozen=True)
class UnixHost:
    """Directory holding the server's Unix-domain socket."""

    path: pathlib.PurePosixPath


@dataclasses.dataclass(frozen=True)
class ConnectParams:
    host: TcpHost | UnixHost
    port: int
    user: str | None = None
    password: str | None = None
    database: str | None = None
    connect_timeout: datetime.timedelta | None = None
    keepalive: datetime.timedelta | None = None
    options: Query = ()


def _seconds(value: str, kind: UrlParseErrorKind) -> datetime.timedelta | None:
    """Non-negative whole seconds; 0 means unset."""
    if not value.isascii() or not value.isdigit():
        raise UrlParseError(kind)
    seconds: int = int(value)
    return datetime.timedelta(seconds=seconds) if seconds else None


def _host_from(raw_host: str, settings: ConnectSettings) -> TcpHost | UnixHost:
    host: str = decode_component(raw_host)
    if not host:
        logger.debug("no host in url, using default %r", settings.host)
        host = settings.host
    if host.startswith("/"):
        return UnixHost(pathlib.PurePosixPath(host))
    return TcpHost(host)


def _from_url(url: Url, settings: ConnectSettings) -> ConnectParams:
    port: int = url.port if url.port is not None else settings.port

    user: str | None
    password: str | None
    if url.user is not None:
        user, password = url.user.user, url.user.password
    else:
        user, password = settings.user, settings.password

    # without an authority the path may be relative
    database: str | None = url.path.path.removeprefix("/") or settings.dbname

    connect_timeout: datetime.timedelta | None = None
    keepalive: datetime.timedelta | None = None
    options: list[tuple[str, str]] = []
    for name, value in url.path.query:
        if name == "connect_timeout":
            connect_timeout = _seconds(value, UrlParseErrorKind.INVALID_CONNECTION_TIMEOUT)
        elif name == "keepalive":
            keepalive = _seconds(value, UrlParseErrorKind.INVALID_KEEPALIVE)
        else:
            options.append((name, value))

    return ConnectParams(
        host=_host_from(url.host, settings),
        port=port,
        user=user,
        password=password,
        database=database,
        connect_timeout=connect_timeout,
        keepalive=keepalive,
        options=tuple(options),
    )


def connect_params_from_url(url: Url | str, settings: ConnectSettings | None = None) -> ConnectParams:
    """Build ConnectParams from a URL, filling gaps from settings (PG* environment by default).
    e.g. connect_params_from_url("postgres://me@%2Frun%2Fpostgresql/app?keepalive=30")
    """
    if settings is None:
        settings = get_settings()
    try:
        if isinstance(url, str):
            url = parse_url(url)
        return _from_url(url, settings)
    except DecodeError as exc:
        raise UrlParseError.from_decode_error(exc) from exc
