import logging
from typing import (
    Any, Optional, Union,
    Dict, FrozenSet, Iterable, Mapping, Set,
)

from . import validators as tx
from .exception import InvalidArgument
from .logging_utils import BraceStyleAdapter
from .types import Credential, NodeAddress, PropertySource

__all__ = (
    'MASTER_KEY',
    'NODES_KEY',
    'SENTINEL_PASSWORD_KEY',
    'MappingPropertySource',
    'SentinelConfig',
)

log = BraceStyleAdapter(logging.getLogger(__name__))

MASTER_KEY = 'spring.redis.sentinel.master'
NODES_KEY = 'spring.redis.sentinel.nodes'
SENTINEL_PASSWORD_KEY = 'spring.redis.sentinel.password'

_node_iv = tx.NodeAddress()
_node_list_iv = tx.DelimiterSeparatedList(_node_iv)
_credential_iv = tx.Credential()
_database_iv = tx.DatabaseIndex()


class MappingPropertySource:
    '''
    A property source backed by an in-memory mapping.
    Non-string values are stringified when read.
    '''

    def __init__(self, mapping: Optional[Mapping[str, Any]] = None) -> None:
        self._data: Dict[str, Any] = dict(mapping) if mapping is not None else {}

    def get_property(self, key: str) -> Optional[str]:
        value = self._data.get(key)
        if value is None:
            return None
        return str(value)

    def set_property(self, key: str, value: Any) -> 'MappingPropertySource':
        self._data[key] = value
        return self

    def __repr__(self) -> str:
        return f'<MappingPropertySource keys={sorted(self._data.keys())!r}>'


def _parse_nodes(nodes: Any) -> Set[NodeAddress]:
    if nodes is None:
        raise InvalidArgument('sentinels', 'sentinel address collection must not be None')
    if isinstance(nodes, (str, bytes)):
        raise InvalidArgument(nodes, 'expected a collection of "host:port" strings, not a single string')
    return {tx.check(_node_iv, node) for node in nodes}


class SentinelConfig:
    '''
    Describes how to reach a Redis master through a set of sentinels.

    It holds the name of the monitored master, the addresses of the sentinels,
    the credential used when talking to the sentinels and the credential
    (and database index) used when talking to the data nodes.
    The two credentials are stored separately and never derived from each other.

    It is a plain mutable value holder without internal locking.
    '''

    def __init__(
        self,
        master: Optional[str] = None,
        sentinels: Optional[Iterable[Any]] = (),
    ) -> None:
        '''
        :param master: The name of the monitored master. It is stored as-is without validation.
        :param sentinels: A collection of ``"host:port"`` strings.  An empty collection
            is allowed but None is rejected.
        '''
        nodes = _parse_nodes(sentinels)
        self._master: Optional[str] = master
        self._sentinels: Set[NodeAddress] = nodes
        self._sentinel_password: Credential = Credential.none()
        self._password: Credential = Credential.none()
        self._database: int = 0
        log.debug('configured master {!r} with {} sentinel(s)', master, len(nodes))

    @classmethod
    def from_property_source(cls, source: PropertySource) -> 'SentinelConfig':
        '''
        Creates a new configuration from the ``spring.redis.sentinel.*`` properties.
        Missing properties are simply left unset.
        '''
        if source is None:
            raise InvalidArgument('source', 'property source must not be None')
        config = cls()
        master = source.get_property(MASTER_KEY)
        if master is not None:
            config.set_master(master)
        nodes = source.get_property(NODES_KEY)
        if nodes is not None:
            config.set_sentinels(tx.check(_node_list_iv, nodes))
        sentinel_password = source.get_property(SENTINEL_PASSWORD_KEY)
        if sentinel_password is not None:
            config.set_sentinel_password(Credential.of(sentinel_password))
        log.debug('read sentinel config from {}: master={!r}, sentinels={}, sentinel password {}',
                  type(source).__name__, config._master, len(config._sentinels),
                  'set' if config._sentinel_password else 'unset')
        return config

    def get_master(self) -> Optional[str]:
        return self._master

    def set_master(self, name: Optional[str]) -> None:
        self._master = name

    def master(self, name: Optional[str]) -> 'SentinelConfig':
        self.set_master(name)
        return self

    def get_sentinels(self) -> FrozenSet[NodeAddress]:
        return frozenset(self._sentinels)

    def set_sentinels(self, nodes: Iterable[Any]) -> None:
        self._sentinels = _parse_nodes(nodes)

    def add_sentinel(self, node: Any) -> None:
        if node is None:
            raise InvalidArgument('node', 'sentinel address must not be None')
        self._sentinels.add(tx.check(_node_iv, node))

    def sentinel(self, host_or_node: Any, port: Optional[int] = None) -> 'SentinelConfig':
        if port is None:
            self.add_sentinel(host_or_node)
        else:
            self.add_sentinel((host_or_node, port))
        return self

    def get_sentinel_password(self) -> Credential:
        return self._sentinel_password

    def set_sentinel_password(self, password: Union[Credential, str, None]) -> None:
        self._sentinel_password = tx.check(_credential_iv, password)

    def get_password(self) -> Credential:
        return self._password

    def set_password(self, password: Union[Credential, str, None]) -> None:
        self._password = tx.check(_credential_iv, password)

    def get_database(self) -> int:
        return self._database

    def set_database(self, index: int) -> None:
        self._database = tx.check(_database_iv, index)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, SentinelConfig):
            return NotImplemented
        return (
            self._master == other._master and
            self._sentinels == other._sentinels and
            self._sentinel_password == other._sentinel_password and
            self._password == other._password and
            self._database == other._database
        )

    def __repr__(self) -> str:
        sentinels = ', '.join(sorted(map(str, self._sentinels)))
        return (
            f'SentinelConfig(master={self._master!r}, sentinels=[{sentinels}], '
            f'database={self._database}, password={self._password!r}, '
            f'sentinel_password={self._sentinel_password!r})'
        )
