import pytest

from lispy.errors import LispyError
from lispy.types.environment import Environment
from lispy.types.error import ErrorKind
from lispy.types.expression import QExpression
from lispy.types.number import Number
from lispy.types.symbol import Symbol


def test_get_missing_is_unbound_error():
    env = Environment()
    result = env.get(Symbol("foo"))
    assert result.is_error()
    assert result.kind is ErrorKind.UNBOUND_SYMBOL
    assert result.message == "unbound symbol: foo"


def test_put_then_get_returns_copy():
    env = Environment()
    env.put("x", Number(1))
    a = env.get("x")
    b = env.get(Symbol("x"))
    assert a == b == Number(1)
    assert a is not b


def test_put_stores_independent_copy():
    env = Environment()
    q = QExpression([Number(1)])
    env.put("q", q)
    q.add(Number(2))
    assert env.get("q") == QExpression([Number(1)])
    got = env.get("q")
    got.add(Number(3))
    assert env.get("q") == QExpression([Number(1)])


def test_put_overwrites_in_place_and_appends_new():
    env = Environment()
    env.put("a", Number(1))
    env.put("b", Number(2))
    env.put("a", Number(3))
    assert env.names() == ["a", "b"]
    assert env.get("a") == Number(3)
    assert len(env) == 2


def test_put_rejects_non_values():
    env = Environment()
    with pytest.raises(LispyError):
        env.put("x", 42)


def test_builtins_registered(env):
    assert env.names() == ["list", "head", "tail", "eval", "join", "+", "*", "-", "/"]
    assert "head" in env


def test_str_shows_bindings():
    env = Environment()
    env.put("x", QExpression([Number(1), Number(2)]))
    assert str(env) == "{x: {1 2}}"
    assert repr(env) == "<Environment {x: {1 2}}>"
