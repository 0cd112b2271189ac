"""Urlp plain matching engine

Every rule is compiled into a matcher. A matcher is handed the whole,
immutable input and a start offset, and either returns a Match or raises
ParseFail. Since nothing but the offset moves, an alternative that fails
leaves nothing behind and the next one simply restarts from the same offset.
"""

import logging
from typing import List
from functools import singledispatch

from .chars import not_digit
from .match import Match
from .exceptions import FailKind, ParseFail
from .rule import (
    Matcher,
    Rule,
    RText, RChars, RDigits,
    RAny, RLongest, RRepeat, ROptional, RAdjacent,
    RMap, RSpan, RTag)


__all__ = [
    'compile_rule',
    'MatcherPlain'
]


logger = logging.getLogger(__name__)


def compile_rule(rule: Rule) -> Matcher:
    return _compile_rule(rule)


@singledispatch
def _compile_rule(rule: Rule) -> 'MatcherPlain':
    raise TypeError('Can not compile {!r}'.format(rule))


class MatcherPlain(Matcher):
    def __init__(self, rule: Rule):
        self.rule: Rule = rule

    def match(self, text: str, start: int = 0) -> Match:
        """Match rule from <text>, start at <start>"""
        raise NotImplementedError


@_compile_rule.register(RText)
class MText(MatcherPlain):
    def __init__(self, rule: RText):
        super().__init__(rule)
        self.ignore_case = rule.ignore_case
        self.text = rule.text.lower() if rule.ignore_case else rule.text
        self.value = rule.value

    def match(self, text: str, start: int = 0) -> Match:
        end = start + len(self.text)
        got = text[start: end]
        if self.ignore_case:
            got = got.lower()
        if got != self.text:
            raise ParseFail(FailKind.LITERAL, start, repr(self.rule))
        value = text[start: end] if self.value is None else self.value
        return Match(text, start, end, value)


@_compile_rule.register(RChars)
class MChars(MatcherPlain):
    def __init__(self, rule: RChars):
        super().__init__(rule)
        self.excluded = rule.excluded
        self.name = rule.name

    def match(self, text: str, start: int = 0) -> Match:
        end = start
        ll = len(text)
        while end < ll and not self.excluded(text[end]):
            end += 1
        if end == start:
            raise ParseFail(FailKind.TOKEN, start, '{} characters'.format(self.name))
        return Match(text, start, end, text[start: end])


@_compile_rule.register(RDigits)
class MDigits(MatcherPlain):
    def __init__(self, rule: RDigits):
        super().__init__(rule)
        self.at_most = rule.at_most
        self.maximum = rule.maximum

    def match(self, text: str, start: int = 0) -> Match:
        end = start
        limit = min(len(text), start + self.at_most)
        while end < limit and not not_digit(text[end]):
            end += 1
        if end == start:
            raise ParseFail(FailKind.TOKEN, start, 'digit characters')
        number = int(text[start: end])
        if number > self.maximum:
            raise ParseFail(FailKind.NUMERIC, start, 'number no larger than {}'.format(self.maximum))
        return Match(text, start, end, number)


@_compile_rule.register(RAny)
class MAny(MatcherPlain):
    def __init__(self, rule: RAny):
        super().__init__(rule)
        self.matchers = [_compile_rule(r) for r in rule.rules]

    def match(self, text: str, start: int = 0) -> Match:
        fails: List[ParseFail] = []
        for matcher in self.matchers:
            try:
                return matcher.match(text, start)
            except ParseFail as e:
                fails.append(e)
        raise furthest(fails)


@_compile_rule.register(RLongest)
class MLongest(MAny):
    def match(self, text: str, start: int = 0) -> Match:
        fails: List[ParseFail] = []
        best = None
        for matcher in self.matchers:
            try:
                m = matcher.match(text, start)
            except ParseFail as e:
                fails.append(e)
            else:
                if best is None or m.index1 > best.index1:
                    best = m
        if best is None:
            raise furthest(fails)
        return best


def furthest(fails: List[ParseFail]) -> ParseFail:
    """The failure which got deepest into the input"""
    return max(fails, key=lambda e: e.position)


@_compile_rule.register(RRepeat)
class MRepeat(MatcherPlain):
    def __init__(self, rule: RRepeat):
        super().__init__(rule)
        self.matcher = _compile_rule(rule.rule)
        self._from = rule._from
        self._to = rule._to

    def match(self, text: str, start: int = 0) -> Match:
        values = []
        cur = start
        fail = None
        while self._to is None or len(values) < self._to:
            try:
                m = self.matcher.match(text, cur)
            except ParseFail as e:
                fail = e
                break
            if m.index1 == cur:
                # a step which consumes nothing would repeat forever
                break
            values.append(m.value)
            cur = m.index1
        if len(values) < self._from:
            if fail is None:
                fail = ParseFail(FailKind.TOKEN, cur, repr(self.rule))
            raise fail
        return Match(text, start, cur, values)


@_compile_rule.register(ROptional)
class MOptional(MatcherPlain):
    def __init__(self, rule: ROptional):
        super().__init__(rule)
        self.matcher = _compile_rule(rule.rule)

    def match(self, text: str, start: int = 0) -> Match:
        try:
            return self.matcher.match(text, start)
        except ParseFail:
            return Match(text, start, start, None)


@_compile_rule.register(RAdjacent)
class MAdjacent(MatcherPlain):
    def __init__(self, rule: RAdjacent):
        super().__init__(rule)
        self.matchers = [_compile_rule(r) for r in rule.rules]

    def match(self, text: str, start: int = 0) -> Match:
        values = []
        cur = start
        for matcher in self.matchers:
            m = matcher.match(text, cur)
            values.append(m.value)
            cur = m.index1
        return Match(text, start, cur, values)


@_compile_rule.register(RMap)
class MMap(MatcherPlain):
    def __init__(self, rule: RMap):
        super().__init__(rule)
        self.matcher = _compile_rule(rule.rule)
        self.fn = rule.fn

    def match(self, text: str, start: int = 0) -> Match:
        m = self.matcher.match(text, start)
        return Match(text, m.index0, m.index1, self.fn(m.value))


@_compile_rule.register(RSpan)
class MSpan(MatcherPlain):
    def __init__(self, rule: RSpan):
        super().__init__(rule)
        self.matcher = _compile_rule(rule.rule)

    def match(self, text: str, start: int = 0) -> Match:
        m = self.matcher.match(text, start)
        return Match(text, m.index0, m.index1, m.content)


@_compile_rule.register(RTag)
class MTag(MatcherPlain):
    def __init__(self, rule: RTag):
        super().__init__(rule)
        self.matcher = _compile_rule(rule.rule)
        self.tag = rule.tag

    def match(self, text: str, start: int = 0) -> Match:
        try:
            m = self.matcher.match(text, start)
        except ParseFail as e:
            if e.stage is None:
                e.stage = self.tag
            logger.debug('%s failed at %d: %s', self.tag, start, e)
            raise
        logger.debug('%s matched %r at %d', self.tag, m.content, start)
        return m
