__version__ = "0.1"

from .config import ConnectSettings, get_settings
from .errors import AuthorityDecodeError, ComponentDecodeError, DecodeError, PathDecodeError, QueryFragmentDecodeError, SchemeDecodeError
from .params import ConnectParams, TcpHost, UnixHost, UrlParseError, UrlParseErrorKind, connect_params_from_url
from .parse import Path, Query, Url, UserInfo, decode, decode_component, parse_path, parse_url
