import pytest
from hypothesis import given, strategies as st

from lispy.types.error import Error, ErrorKind, bad_number
from lispy.types.expression import QExpression, SExpression
from lispy.types.function import Function
from lispy.types.number import MAX_INT, MIN_INT, Number, trunc_div, wrap
from lispy.types.symbol import Symbol


def test_number_copy_is_independent():
    n = Number(5)
    c = n.copy()
    assert c == n and c is not n


def test_symbol_name_is_read_only():
    s = Symbol("head")
    with pytest.raises(AttributeError):
        s.name = "tail"
    assert s.copy() == Symbol("head")


def test_error_copy_keeps_kind_and_message():
    e = bad_number()
    c = e.copy()
    assert c == e and c is not e
    assert c.kind is ErrorKind.BAD_NUMBER
    assert c.is_error()


def test_function_copy_shares_callable_only():
    def fn(env, args):
        return Number(0)
    f = Function("zero", fn)
    c = f.copy()
    assert c == f and c is not f and c.fn is fn


def test_deep_copy_of_aggregates():
    inner = QExpression([Number(1), Symbol("x")])
    outer = SExpression([inner, Number(2)])
    dup = outer.copy()
    assert dup == outer
    assert dup.cells[0] is not inner
    dup.cells[0].add(Number(3))
    assert len(inner) == 2


def test_retag_moves_cells():
    s = SExpression([Number(1), Number(2)])
    q = s.retag(QExpression)
    assert q == QExpression([Number(1), Number(2)])
    assert len(s) == 0


def test_sexpr_and_qexpr_are_distinct():
    assert SExpression([Number(1)]) != QExpression([Number(1)])


@pytest.mark.parametrize(
    "x,expected",
    [
        (MAX_INT + 1, MIN_INT),
        (MIN_INT - 1, MAX_INT),
        (-1, -1),
        (0, 0),
    ]
)
def test_wrap_twos_complement(x, expected):
    assert wrap(x) == expected


@pytest.mark.parametrize(
    "a,b,expected",
    [
        (7, 2, 3),
        (-7, 2, -3),
        (7, -2, -3),
        (-7, -2, 3),
        (1, 3, 0),
    ]
)
def test_trunc_div_rounds_toward_zero(a, b, expected):
    assert trunc_div(a, b) == expected


@given(st.recursive(
    st.integers(min_value=-1000, max_value=1000).map(Number),
    lambda children: st.lists(children, max_size=4).map(QExpression),
    max_leaves=20,
))
def test_copy_equals_but_never_aliases(value):
    dup = value.copy()
    assert dup == value
    assert dup is not value
    if isinstance(value, QExpression):
        n = len(value)
        dup.cells.clear()
        assert len(value) == n


def test_error_repr_names_kind():
    assert repr(Error(ErrorKind.ARITY, "x")) == "Error(ARITY, 'x')"
