from .exceptions import UrlpException, InvalidRule, ParseFail, FailKind
from .match import Match
from .rule import Rule, R
from .types import Scheme, Authority, Host, IP, URI
from .grammar import uri, parse, match_uri


__version__ = '0.1.0'
