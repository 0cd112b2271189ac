from typing import Any, Callable, List, Optional, Tuple

from .match import Match
from .exceptions import InvalidRule


class Matcher(object):
    def match(self, text: str, start: int = 0) -> Match:
        raise NotImplementedError


class Rule(object):
    def __init__(self):
        self._matcher: Optional[Matcher] = None

    @classmethod
    def make(cls, o):
        if isinstance(o, Rule):
            return o
        elif isinstance(o, str):
            return RText(o)
        else:
            raise InvalidRule('Can not make a rule from {!r}'.format(o))

    def __add__(self, rule) -> 'Rule':
        return RAdjacent([self, self.make(rule)])

    def __radd__(self, rule) -> 'Rule':
        return RAdjacent([self.make(rule), self])

    def __or__(self, rule) -> 'Rule':
        return RAny([self, self.make(rule)])

    def __ror__(self, rule) -> 'Rule':
        return RAny([self.make(rule), self])

    @property
    def matcher(self) -> Matcher:
        if self._matcher is None:
            # circular dependency
            from .plain import compile_rule
            self._matcher = compile_rule(self)
        return self._matcher

    def match(self, text: str, start: int = 0) -> Match:
        """Match rule against <text> from <start>

        if match fails, raise ParseFail
        """
        return self.matcher.match(text, start)

    def parse(self, text: str) -> Tuple[str, Any]:
        """Match rule from the beginning of <text>, return (remaining input, value)"""
        return self.match(text, 0).pair()

    def pformat(self):
        return str(self)

    def pp(self):
        print(self.pformat())


class RText(Rule):
    """A rule that matches a fixed literal"""

    def __init__(self, text: str, ignore_case: bool = False, value: Any = None):
        super().__init__()
        if not text:
            raise InvalidRule('Empty literal')
        self.text: str = text
        self.ignore_case: bool = ignore_case
        self.value = value

    def __repr__(self):
        return ('i' if self.ignore_case else '') + repr(self.text)


class RChars(Rule):
    """A non-empty run of characters, each NOT excluded by <excluded>"""

    def __init__(self, excluded: Callable[[str], bool], name: str):
        super().__init__()
        self.excluded = excluded
        self.name: str = name

    def __repr__(self):
        return '<{}>+'.format(self.name)


class RDigits(Rule):
    """1 to <at_most> decimal digits, converted to an int no larger than <maximum>"""

    def __init__(self, at_most: int, maximum: int):
        super().__init__()
        if at_most < 1:
            raise InvalidRule('Digit run must allow at least one digit')
        self.at_most: int = at_most
        self.maximum: int = maximum

    def __repr__(self):
        return 'digit{{1,{}}}'.format(self.at_most)


class RAny(Rule):
    """Try rules in order at the same position, the first one matching wins"""

    def __init__(self, rules: List[Rule]):
        super().__init__()
        assert rules
        self.rules: List[Rule] = rules

    def __or__(self, rule) -> Rule:
        return RAny(list(self.rules) + [self.make(rule)])

    def __ror__(self, rule) -> Rule:
        return RAny([self.make(rule)] + list(self.rules))

    def __repr__(self):
        return ' | '.join(['(' + str(r) + ')' for r in self.rules])


class RLongest(RAny):
    """Try every rule at the same position, keep the longest match

    Earlier rules win ties.
    """

    def __or__(self, rule) -> Rule:
        return RAny([self, self.make(rule)])

    def __ror__(self, rule) -> Rule:
        return RAny([self.make(rule), self])

    def __repr__(self):
        return 'longest(' + ', '.join(str(r) for r in self.rules) + ')'


class RRepeat(Rule):
    def __init__(self, rule: Rule, _from: int, _to: int = None):
        super().__init__()
        self.rule: Rule = rule
        self._from: int = _from
        self._to: Optional[int] = _to

    def __repr__(self):
        to = self._to if isinstance(self._to, int) else ''
        return '(%s){%s,%s}' % (self.rule, self._from, to)


class ROptional(Rule):
    def __init__(self, rule: Rule):
        super().__init__()
        self.rule: Rule = rule

    def __repr__(self):
        return '({})?'.format(self.rule)


class RAdjacent(Rule):
    def __init__(self, rules: List[Rule]):
        super().__init__()
        assert rules
        self.rules: List[Rule] = rules

    def __add__(self, rule) -> Rule:
        return RAdjacent(list(self.rules) + [self.make(rule)])

    def __radd__(self, rule) -> Rule:
        return RAdjacent([self.make(rule)] + list(self.rules))

    def __repr__(self):
        return ' '.join('({})'.format(r) for r in self.rules)


class RMap(Rule):
    """Transform the value of a successful match"""

    def __init__(self, rule: Rule, fn: Callable[[Any], Any]):
        super().__init__()
        self.rule: Rule = rule
        self.fn = fn

    def __repr__(self):
        return repr(self.rule)


class RSpan(Rule):
    """The value becomes the text the inner rule consumed"""

    def __init__(self, rule: Rule):
        super().__init__()
        self.rule: Rule = rule

    def __repr__(self):
        return repr(self.rule)


class RTag(Rule):
    def __init__(self, rule: Rule, tag: str):
        super().__init__()
        self.rule: Rule = rule
        assert tag is not None
        self.tag: str = tag

    def __repr__(self):
        return '(?<{}>:{})'.format(self.tag, self.rule)


class R(object):
    @staticmethod
    def text(text: str, value: Any = None) -> Rule:
        """Exact literal"""
        return RText(text, value=value)

    @staticmethod
    def itext(text: str, value: Any = None) -> Rule:
        """Case insensitive literal"""
        return RText(text, ignore_case=True, value=value)

    @staticmethod
    def chars(excluded: Callable[[str], bool], name: str) -> Rule:
        """Token run of a character class"""
        return RChars(excluded, name)

    @staticmethod
    def digits(at_most: int, maximum: int) -> Rule:
        return RDigits(at_most, maximum)

    @staticmethod
    def tag(rule, tag) -> Rule:
        """tag a rule"""
        return RTag(Rule.make(rule), tag=tag)

    @staticmethod
    def repeat(rule, _from: int = None, _to: int = None, exact: int = None) -> Rule:
        """repeat a rule some times, greedily

        if _to is None, repeat time upbound is not limited
        """
        if exact is not None:
            _from = exact
            _to = exact

        if _from is None:
            _from = 0

        if _from < 0:
            raise InvalidRule('Repeat lower bound less than zero')

        if _to is not None and _to < _from:
            raise InvalidRule('Repeat upper bound less than lower bound')

        return RRepeat(Rule.make(rule), _from=_from, _to=_to)

    n = repeat

    @staticmethod
    def n01(rule) -> Rule:
        """A rule can be both match or not, value is None when it does not"""
        return ROptional(Rule.make(rule))

    @staticmethod
    def any(*rules) -> Rule:
        """Try to match rules in order, select the first one match"""
        return RAny([Rule.make(r) for r in rules])

    @staticmethod
    def longest(*rules) -> Rule:
        """Try to match all rules, select the longest match"""
        return RLongest([Rule.make(r) for r in rules])

    @staticmethod
    def map(rule, fn: Callable[[Any], Any]) -> Rule:
        return RMap(Rule.make(rule), fn)

    @staticmethod
    def span(rule) -> Rule:
        return RSpan(Rule.make(rule))

    @staticmethod
    def pattern(rule) -> Rule:
        return Rule.make(rule)
