import pytest
import trafaret as t

from sentinelconf import validators as tx
from sentinelconf.exception import InvalidArgument
from sentinelconf.types import Credential, NodeAddress


def test_node_address():
    iv = tx.NodeAddress()
    assert iv.check('127.0.0.1:123') == NodeAddress('127.0.0.1', 123)
    assert iv.check(('localhost', 456)) == NodeAddress('localhost', 456)
    assert iv.check(['localhost', '456']) == NodeAddress('localhost', 456)
    assert iv.check({'host': 'localhost', 'port': 789}) == NodeAddress('localhost', 789)
    node = NodeAddress('x', 1)
    assert iv.check(node) is node

    with pytest.raises(t.DataError):
        iv.check('localhost')
    with pytest.raises(t.DataError):
        iv.check(None)
    with pytest.raises(t.DataError):
        iv.check(('localhost', 0))
    with pytest.raises(t.DataError):
        iv.check(('localhost', 'abc'))
    with pytest.raises(t.DataError):
        iv.check(('', 123))
    with pytest.raises(t.DataError):
        iv.check(('localhost', 1, 2))
    with pytest.raises(t.DataError):
        iv.check({'host': 'localhost'})
    with pytest.raises(t.DataError):
        iv.check(123)


def test_node_address_error_message():
    with pytest.raises(t.DataError) as e:
        tx.NodeAddress().check('localhost')
    assert 'colon' in e.value.as_dict()


def test_delimiter_separated_list():
    iv = tx.DelimiterSeparatedList(tx.NodeAddress())
    assert iv.check('127.0.0.1:123') == [NodeAddress('127.0.0.1', 123)]
    assert iv.check('127.0.0.1:123,localhost:456, localhost:789') == [
        NodeAddress('127.0.0.1', 123),
        NodeAddress('localhost', 456),
        NodeAddress('localhost', 789),
    ]
    assert iv.check('') == []

    with pytest.raises(t.DataError) as e:
        iv.check('127.0.0.1:123,localhost')
    assert 'item #1' in e.value.as_dict()
    with pytest.raises(t.DataError):
        iv.check('127.0.0.1:123,,localhost:456')
    with pytest.raises(t.DataError):
        iv.check(['127.0.0.1:123'])

    iv = tx.DelimiterSeparatedList(t.String, delimiter=';', strip=False)
    assert iv.check('a; b') == ['a', ' b']


def test_credential():
    iv = tx.Credential()
    assert iv.check(None) == Credential.none()
    assert iv.check('') == Credential.of('')
    assert iv.check('secret') == Credential.of('secret')
    cred = Credential.of('x')
    assert iv.check(cred) is cred
    with pytest.raises(t.DataError):
        iv.check(1234)


def test_database_index():
    iv = tx.DatabaseIndex()
    assert iv.check(0) == 0
    assert iv.check(15) == 15
    with pytest.raises(t.DataError):
        iv.check(-1)
    with pytest.raises(t.DataError):
        iv.check(True)
    with pytest.raises(t.DataError):
        iv.check('zero')


def test_check_translates_errors():
    assert tx.check(tx.NodeAddress(), 'localhost:1') == NodeAddress('localhost', 1)
    with pytest.raises(InvalidArgument) as e:
        tx.check(tx.NodeAddress(), 'localhost')
    assert e.value.args[0] == 'localhost'
    assert 'localhost' in str(e.value)
    assert not isinstance(e.value, t.DataError)
