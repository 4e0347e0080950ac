"""pgurl.errors
Closed error taxonomies reported while decoding a connection URL.
"""

import enum

from typing import Self


class ComponentDecodeError(enum.Enum):
    """Malformed %XX escape."""

    NO_TWO_TRAILING_BYTES = "no two trailing bytes"
    PERCENTAGE_SIGN_NOT_ESCAPED = "% sign not escaped"


class SchemeDecodeError(enum.Enum):
    SCHEME_MUST_BEGIN_WITH_LETTER = "url: Scheme must begin with a letter"
    EMPTY_SCHEME = "url: Scheme cannot be empty"
    SCHEME_NOT_TERMINATED_WITH_COLON = "url: Scheme must be terminated with a colon"
    INVALID_CHARACTER = "url: Scheme contains invalid character(s)"


class AuthorityDecodeError(enum.Enum):
    ILLEGAL_CHARACTER_AUTHORITY = "Illegal character in authority"
    ILLEGAL_CHARACTER_IPV6 = "Illegal characters in IPv6 address"
    INVALID_DOUBLE_COLON = "Invalid ':' in authority"
    INVALID_AT_SIGN = "Invalid '@' in authority"
    PORT_HAS_NON_DIGIT_CHARS = "Non-digit characters in port number"
    FAILED_TO_PARSE_PORT = "Failed to parse port: {}"


class PathDecodeError(enum.Enum):
    # INVALID_CHARACTER is never produced: bad path characters report PATH_MUST_START_WITH_SLASH.
    INVALID_CHARACTER = "Invalid character in path"
    PATH_MUST_START_WITH_SLASH = "Non-empty path must begin with '/' in presence of authority"


class QueryFragmentDecodeError(enum.Enum):
    QUERY_DIDNT_START_WITH_QUESTION_MARK = "Query didn't start with '?': '{}..'"


DecodeReason = (
    ComponentDecodeError | SchemeDecodeError | AuthorityDecodeError | PathDecodeError | QueryFragmentDecodeError
)

_CATEGORIES: dict[type[enum.Enum], str] = {
    ComponentDecodeError: "component",
    SchemeDecodeError: "scheme",
    AuthorityDecodeError: "authority",
    PathDecodeError: "path",
    QueryFragmentDecodeError: "query_fragment",
}

# Reasons whose message carries a piece of the offending input.
_WITH_DETAIL: frozenset[enum.Enum] = frozenset(
    (AuthorityDecodeError.FAILED_TO_PARSE_PORT, QueryFragmentDecodeError.QUERY_DIDNT_START_WITH_QUESTION_MARK)
)


class DecodeError(ValueError):
    """Raised when a URL, path or component cannot be decoded.
    `reason` is a member of exactly one of the five taxonomies above; `detail` holds the
    port text or query prefix for the two reasons that carry one.
    """

    __slots__ = ("_reason", "_detail")

    def __init__(self: Self, reason: DecodeReason, detail: str | None = None) -> None:
        if type(reason) not in _CATEGORIES:
            raise TypeError(f"not a decode error reason: {reason!r}")
        if (reason in _WITH_DETAIL) != (detail is not None):
            raise TypeError(f"{reason.name} {'requires' if reason in _WITH_DETAIL else 'takes no'} detail")
        super().__init__(reason, detail)
        self._reason: DecodeReason = reason
        self._detail: str | None = detail

    @property
    def reason(self: Self) -> DecodeReason:
        return self._reason

    @property
    def detail(self: Self) -> str | None:
        return self._detail

    @property
    def category(self: Self) -> str:
        """One of "component", "scheme", "authority", "path" or "query_fragment"."""
        return _CATEGORIES[type(self._reason)]

    def __str__(self: Self) -> str:
        if self._detail is not None:
            return self._reason.value.format(self._detail)
        return self._reason.value

    def __repr__(self: Self) -> str:
        if self._detail is not None:
            return f"{self.__class__.__name__}({self._reason}, {self._detail!r})"
        return f"{self.__class__.__name__}({self._reason})"

    def __eq__(self: Self, other: object) -> bool:
        if not isinstance(other, DecodeError):
            return NotImplemented
        return (self._reason, self._detail) == (other._reason, other._detail)

    def __hash__(self: Self) -> int:
        return hash((self._reason, self._detail))
