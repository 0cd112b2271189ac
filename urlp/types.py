from enum import Enum
from typing import List, NamedTuple, Optional, Tuple, Union


__all__ = [
    'Scheme', 'Authority', 'Host', 'IP', 'Resource', 'Port', 'Path',
    'QueryParam', 'QueryParams', 'Fragment', 'URI'
]


class Scheme(Enum):
    HTTP = 'http'
    HTTPS = 'https'

    @property
    def prefix(self) -> str:
        return self.value + '://'


class Authority(NamedTuple):
    username: str
    password: Optional[str] = None


class Host(NamedTuple):
    name: str

    def __str__(self):
        return self.name


class IP(NamedTuple):
    octets: Tuple[int, int, int, int]

    def __str__(self):
        return '.'.join(str(o) for o in self.octets)


Resource = Union[Host, IP]
Port = int
Path = List[str]
QueryParam = Tuple[str, str]
QueryParams = List[QueryParam]
Fragment = str


class URI(NamedTuple):
    scheme: Scheme
    resource: Resource
    authority: Optional[Authority] = None
    port: Optional[Port] = None
    path: Optional[Path] = None
    query: Optional[QueryParams] = None
    fragment: Optional[Fragment] = None

    def unparse(self) -> str:
        """Compose the URI back into text"""
        s = self.scheme.prefix
        if self.authority is not None:
            s += self.authority.username
            if self.authority.password is not None:
                s += ':' + self.authority.password
            s += '@'
        s += str(self.resource)
        if self.port is not None:
            s += ':{}'.format(self.port)
        if self.path is not None:
            s += '/' + '/'.join(self.path)
        if self.query is not None:
            s += '?' + '&'.join('{}={}'.format(k, v) for k, v in self.query)
        if self.fragment is not None:
            s += '#' + self.fragment
        return s

    def pformat(self) -> str:
        lines = ['URI {']
        lines.append('    scheme: {},'.format(self.scheme.name))
        if self.authority is None:
            lines.append('    authority: None,')
        else:
            lines.append('    authority: ({!r}, {!r}),'.format(*self.authority))
        if isinstance(self.resource, IP):
            lines.append('    resource: IP({}),'.format(list(self.resource.octets)))
        else:
            lines.append('    resource: Host({!r}),'.format(self.resource.name))
        lines.append('    port: {},'.format(self.port))
        lines.append('    path: {},'.format(self.path))
        if self.query is None:
            lines.append('    query: None,')
        else:
            lines.append('    query: [')
            for k, v in self.query:
                lines.append('        ({!r}, {!r}),'.format(k, v))
            lines.append('    ],')
        lines.append('    fragment: {!r},'.format(self.fragment))
        lines.append('}')
        return '\n'.join(lines)

    def pp(self):
        print(self.pformat())
