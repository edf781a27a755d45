from collections import namedtuple
from typing import (
    Any, Optional,
    Tuple,
)
from typing_extensions import Protocol

import attr

from .exception import InvalidArgument

__all__ = (
    'NodeAddress',
    'Credential',
    'PropertySource',
)


class NodeAddress(namedtuple('NodeAddress', 'host port')):
    '''
    A network address of a sentinel (or any other Redis node).

    Two addresses are equal if and only if both their host strings and port
    numbers are equal, so it can be used as a set member or a dict key.
    The host part is kept verbatim without resolving it.
    '''

    __slots__ = ()

    def __new__(cls, host: str, port: int) -> 'NodeAddress':
        if not isinstance(host, str) or not host.strip():
            raise InvalidArgument(host, 'host must be a non-empty string')
        if isinstance(port, bool) or not isinstance(port, int) or not (0 < port < 65536):
            raise InvalidArgument(port, 'port number must be between 1 and 65535')
        return super().__new__(cls, host, port)

    @classmethod
    def _make(cls, iterable) -> 'NodeAddress':
        host, port = iterable
        return cls(host, port)

    def _replace(self, **kwargs) -> 'NodeAddress':
        host = kwargs.pop('host', self.host)
        port = kwargs.pop('port', self.port)
        if kwargs:
            raise ValueError(f'Got unexpected field names: {list(kwargs)!r}')
        return type(self)(host, port)

    @classmethod
    def from_str(cls, value: Any) -> 'NodeAddress':
        '''
        Parses a ``"host:port"`` expression.  There must be exactly one colon
        separating a non-empty host and a decimal port number, so bracketed
        IPv6 literals are not accepted.  Whitespace around the whole expression
        is ignored.
        '''
        if not isinstance(value, str):
            raise InvalidArgument(value, 'address must be a "host:port" string')
        host, sep, port = value.strip().partition(':')
        if not sep or ':' in port:
            raise InvalidArgument(value, 'address must contain exactly one colon between host and port')
        if not host.strip():
            raise InvalidArgument(value, 'host must not be empty')
        if not (port.isascii() and port.isdigit()):
            raise InvalidArgument(value, f'{port!r} is not a valid port number')
        return cls(host, int(port))

    def as_sockaddr(self) -> Tuple[str, int]:
        return str(self.host), self.port

    def __str__(self) -> str:
        return f'{self.host}:{self.port}'


def _check_secret(instance, attribute, value):
    if value is not None and not isinstance(value, str):
        raise InvalidArgument(type(value).__name__, 'secret must be a string or None')


@attr.s(auto_attribs=True, frozen=True, slots=True, repr=False)
class Credential:
    '''
    An optional secret used to authenticate against a Redis node.

    The absent credential (``Credential.none()``) is distinct from a credential
    wrapping an empty string, and all absent credentials are equal.
    The secret value never appears in ``repr()``.
    '''
    secret: Optional[str] = attr.ib(default=None, validator=_check_secret)

    @classmethod
    def none(cls) -> 'Credential':
        return cls(None)

    @classmethod
    def of(cls, secret: Optional[str]) -> 'Credential':
        return cls(secret)

    def is_present(self) -> bool:
        return self.secret is not None

    def get(self) -> str:
        if self.secret is None:
            raise InvalidArgument('secret', 'no credential is present')
        return self.secret

    def to_optional(self) -> Optional[str]:
        return self.secret

    def __bool__(self) -> bool:
        return self.is_present()

    def __repr__(self) -> str:
        if self.secret is None:
            return 'Credential(<none>)'
        return 'Credential(*****)'


class PropertySource(Protocol):
    '''
    A key-value lookup which supplies configuration properties.
    It returns None for unknown keys.
    '''

    def get_property(self, key: str) -> Optional[str]:
        ...
