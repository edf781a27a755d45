'''
An extension module to Trafaret which provides the type checkers
used to parse and validate sentinel configurations.
'''

from typing import Any, List, Mapping, Sequence

import trafaret as t

from .exception import InvalidArgument
from .types import (
    Credential as _Credential,
    NodeAddress as _NodeAddress,
)

__all__ = (
    'NodeAddress',
    'DelimiterSeparatedList',
    'Credential',
    'DatabaseIndex',
    'check',
)


class NodeAddress(t.Trafaret):

    def check_and_return(self, value: Any) -> _NodeAddress:
        if isinstance(value, _NodeAddress):
            return value
        if isinstance(value, str):
            try:
                return _NodeAddress.from_str(value)
            except InvalidArgument as e:
                self._failure(e.args[-1], value=value)
        elif isinstance(value, Sequence):
            if len(value) != 2:
                self._failure('value as array must contain only two values for host and port', value=value)
            host, port = value[0], value[1]
        elif isinstance(value, Mapping):
            try:
                host, port = value['host'], value['port']
            except KeyError:
                self._failure('value as map must contain "host" and "port" keys', value=value)
        else:
            self._failure('unrecognized value type', value=value)
        if isinstance(port, str) and port.isascii() and port.isdigit():
            port = int(port)
        try:
            port = t.Int[1:65535].check(port)
        except t.DataError:
            self._failure('port number must be between 1 and 65535', value=value)
        try:
            return _NodeAddress(host, port)
        except InvalidArgument as e:
            self._failure(e.args[-1], value=value)


class DelimiterSeparatedList(t.Trafaret):
    '''
    Splits a string by the given delimiter and checks each piece with the item trafaret.
    There is no escaping, and an empty string yields an empty list.
    '''

    def __init__(self, item_trafaret: t.Trafaret, *, delimiter: str = ',', strip: bool = True) -> None:
        if isinstance(item_trafaret, type):
            item_trafaret = item_trafaret()
        self._item_trafaret = item_trafaret
        self._delimiter = delimiter
        self._strip = strip

    def check_and_return(self, value: Any) -> List[Any]:
        if not isinstance(value, str):
            self._failure('value must be a string', value=value)
        if not value:
            return []
        result = []
        for idx, item in enumerate(value.split(self._delimiter)):
            if self._strip:
                item = item.strip()
            try:
                result.append(self._item_trafaret.check(item))
            except t.DataError as e:
                self._failure(f'item #{idx} ({item!r}): {e.as_dict()}', value=item)
        return result


class Credential(t.Trafaret):

    def check_and_return(self, value: Any) -> _Credential:
        if isinstance(value, _Credential):
            return value
        if value is None or isinstance(value, str):
            return _Credential.of(value)
        self._failure('value must be either a string or null', value=value)


class DatabaseIndex(t.Trafaret):

    def check_and_return(self, value: Any) -> int:
        if isinstance(value, bool):
            self._failure('value is not an integer', value=value)
        try:
            return t.Int(gte=0).check(value)
        except t.DataError:
            self._failure('database index must be a non-negative integer', value=value)


def check(iv: t.Trafaret, value: Any) -> Any:
    '''
    Runs the given trafaret and translates its validation error into
    :class:`~sentinelconf.exception.InvalidArgument` carrying the rejected value.
    '''
    try:
        return iv.check(value)
    except t.DataError as e:
        raise InvalidArgument(value, e.as_dict()) from None
