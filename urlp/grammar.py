"""The URI grammar

    uri        := scheme authority? resource port? path? query? fragment?
    scheme     := "http://" | "https://"   (case-insensitive)
    authority  := token ( ":" token )? "@"
    resource   := host | ip
    host       := ( token "." )+ alpha-label | token
    ip         := octet "." octet "." octet "." octet
    port       := ":" digit{1,5}
    path       := ( "/" path-token? )+
    query      := "?" pair ( "&" pair )*     pair := token "=" token
    fragment   := "#" token

Each grammar unit is a rule object, <unit>_rule, and a function <unit>(text)
returning (remaining input, value) or raising ParseFail.
"""

import logging
from typing import Tuple

from .chars import not_alpha, not_host_char, not_path_char
from .exceptions import FailKind, ParseFail
from .match import Match
from .rule import R, Rule
from .types import (
    Authority, Fragment, Host, IP, Path, Port, QueryParams, Resource, Scheme, URI)


__all__ = [
    'scheme', 'authority', 'host', 'ip', 'resource', 'port', 'path', 'query', 'fragment',
    'uri', 'parse', 'match_uri',
]


logger = logging.getLogger(__name__)


host_token = R.chars(not_host_char, 'host')
path_token = R.chars(not_path_char, 'path')
alpha_label = R.chars(not_alpha, 'alphabetic')

octet = R.digits(3, 255)
pair = R.map(host_token + '=' + host_token, lambda v: (v[0], v[2]))


# literal to Scheme is decided by the alternative that matched
scheme_rule = R.tag(R.any(
    R.itext('http://', value=Scheme.HTTP),
    R.itext('https://', value=Scheme.HTTPS),
), 'scheme')

authority_rule = R.tag(R.map(
    host_token + R.n01(R.map(':' + host_token, lambda v: v[1])) + '@',
    lambda v: Authority(v[0], v[1]),
), 'authority')

host_rule = R.tag(R.map(
    R.span(R.any(
        R.n(host_token + '.', 1) + alpha_label,
        host_token,
    )),
    Host,
), 'host')

ip_rule = R.tag(R.map(
    octet + '.' + octet + '.' + octet + '.' + octet,
    lambda v: IP((v[0], v[2], v[4], v[6])),
), 'ip')

resource_rule = R.tag(R.longest(host_rule, ip_rule), 'resource')

port_rule = R.tag(R.map(':' + R.digits(5, 65535), lambda v: v[1]), 'port')

path_rule = R.tag(R.map(
    R.n('/' + R.n01(path_token), 1),
    lambda steps: [segment for _, segment in steps if segment is not None],
), 'path')

query_rule = R.tag(R.map(
    '?' + pair + R.n(R.map('&' + pair, lambda v: v[1])),
    lambda v: [v[1]] + v[2],
), 'query')

fragment_rule = R.tag(R.map('#' + host_token, lambda v: v[1]), 'fragment')


def scheme(text: str) -> Tuple[str, Scheme]:
    return scheme_rule.parse(text)


def authority(text: str) -> Tuple[str, Authority]:
    return authority_rule.parse(text)


def host(text: str) -> Tuple[str, Host]:
    return host_rule.parse(text)


def ip(text: str) -> Tuple[str, IP]:
    return ip_rule.parse(text)


def resource(text: str) -> Tuple[str, Resource]:
    """Host or IPv4 address

    Host is tried first, but a dotted quad wins when it covers more input,
    so that "10.0.0.1" is an IP rather than the host "10".
    """
    return resource_rule.parse(text)


def port(text: str) -> Tuple[str, Port]:
    return port_rule.parse(text)


def path(text: str) -> Tuple[str, Path]:
    return path_rule.parse(text)


def query(text: str) -> Tuple[str, QueryParams]:
    return query_rule.parse(text)


def fragment(text: str) -> Tuple[str, Fragment]:
    return fragment_rule.parse(text)


def _required(rule: Rule, text: str, start: int, stage: str) -> Match:
    try:
        return rule.match(text, start)
    except ParseFail as e:
        raise ParseFail(FailKind.MISSING, start, stage, stage=stage) from e


def _optional(rule: Rule, text: str, start: int) -> Match:
    try:
        return rule.match(text, start)
    except ParseFail:
        return Match(text, start, start, None)


def match_uri(text: str, start: int = 0) -> Match:
    """Run every stage in grammar order from <start>, the match value is the URI"""
    m = _required(scheme_rule, text, start, 'scheme')
    scheme_ = m.value
    m = _optional(authority_rule, text, m.end())
    authority_ = m.value
    m = _required(resource_rule, text, m.end(), 'resource')
    resource_ = m.value
    m = _optional(port_rule, text, m.end())
    port_ = m.value
    m = _optional(path_rule, text, m.end())
    path_ = m.value
    m = _optional(query_rule, text, m.end())
    query_ = m.value
    m = _optional(fragment_rule, text, m.end())
    fragment_ = m.value

    result = URI(
        scheme=scheme_,
        authority=authority_,
        resource=resource_,
        port=port_,
        path=path_,
        query=query_,
        fragment=fragment_,
    )
    logger.debug('parsed %r, %d characters left', text[start: m.end()], len(text) - m.end())
    return Match(text, start, m.end(), result)


def uri(text: str) -> Tuple[str, URI]:
    """Parse a URI from the beginning of <text>, return (remaining input, URI)"""
    return match_uri(text).pair()


def parse(text: str) -> URI:
    """Parse <text> which must be exactly one URI"""
    m = match_uri(text)
    if m.end() != len(text):
        raise ParseFail(FailKind.TRAILING, m.end(), 'end of input')
    return m.value
