from enum import Enum


__all__ = [
    'FailKind', 'UrlpException', 'InvalidRule', 'ParseFail'
]


class FailKind(Enum):
    LITERAL = 'literal mismatch'
    TOKEN = 'expected token'
    NUMERIC = 'numeric conversion overflow'
    MISSING = 'required stage missing'
    TRAILING = 'unconsumed input'


class UrlpException(Exception):
    pass


class InvalidRule(UrlpException):
    pass


class ParseFail(UrlpException):
    """A rule could not recognize its grammar unit

    <position> is the offset in the original input where the failure occurred.
    """

    def __init__(self, kind: FailKind, position: int, expected: str = '', stage=None):
        self.kind: FailKind = kind
        self.position: int = position
        self.expected: str = expected
        self.stage = stage
        super().__init__(str(self))

    def __str__(self):
        s = '{} at position {}'.format(self.kind.value, self.position)
        if self.expected:
            s += ': expected {}'.format(self.expected)
        if self.stage:
            s += ' (in {})'.format(self.stage)
        return s

    def __repr__(self):
        return '{}({}, {}, {})'.format(
            self.__class__.__name__, self.kind.name, self.position, repr(self.expected))
