from typing import Any, Tuple

from termcolor import colored


__all__ = [
    'Match'
]


class Match(object):
    """A successful match of a rule

    The whole input is kept as <text>, the match covers text[start: end],
    and carries the structured <value> the rule produced.
    """

    def __init__(self, text: str, start: int, end: int, value: Any = None):
        self.text: str = text
        assert end >= start >= 0
        self.index0: int = start
        self.index1: int = end
        self.value = value

    @property
    def content(self) -> str:
        return self.text[self.index0: self.index1]

    @property
    def rest(self) -> str:
        return self.text[self.index1:]

    # start(), end() as methods, simulating re MatchObject behaviour
    def start(self):
        return self.index0

    def end(self):
        return self.index1

    def pair(self) -> Tuple[str, Any]:
        """The (remaining input, value) pair"""
        return self.rest, self.value

    def __repr__(self):
        return '{}({}, {}, content={}, value={})'.format(
            self.__class__.__name__, self.index0, self.index1, repr(self.content), repr(self.value))

    def __eq__(self, o):
        if isinstance(o, Match):
            return self.text == o.text \
                and self.index0 == o.index0 \
                and self.index1 == o.index1 \
                and self.value == o.value
        return False

    def pformat(self) -> str:
        return 'consumed {!r}, remaining {!r}'.format(self.content, self.rest)

    def pp(self):
        """Pretty Print in terminals, designed for terminal users"""
        print(pretty_format(self))


def pretty_format(m: Match) -> str:
    head = m.text[:m.index0]
    ws = colored(head, attrs=['dark']) if head else ''
    ws += colored(m.content, 'green')
    if m.rest:
        ws += colored(m.rest, 'red', attrs=['underline'])
    return ws
