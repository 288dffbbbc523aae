import pytest
from rdeval import Evaluator, WS, EvaluatorInitError, TrailingInputError, \
    MalformedNumericLiteralError


def test_no_whitespace_by_default():

    with pytest.raises(TrailingInputError) as e:
        Evaluator().parse("2 + 3")

    assert e.value.position == 1


def test_default_whitespaces():

    p = Evaluator(ws=WS)

    assert p.parse("""2+  3 * (4
    +5  )
    """) == 29.
    assert p.parse("  ( 1.5 )  ") == 1.5


def test_whitespace_redefinition():

    # Make newline treated as non-ws character
    p = Evaluator(ws=' \t')

    assert p.parse("2+  3 * (4 +5  ) ") == 29.

    with pytest.raises(TrailingInputError) as e:
        p.parse("2+  3\n")

    assert e.value.position == 5


def test_whitespace_separates_numbers():

    p = Evaluator(ws=WS)

    with pytest.raises(TrailingInputError) as e:
        p.parse("1 2")

    assert e.value.position == 2


def test_whitespace_inside_number():

    p = Evaluator(ws=WS)

    with pytest.raises(TrailingInputError):
        p.parse("1. 5")

    with pytest.raises(MalformedNumericLiteralError):
        p.parse("1 + . + 2")


@pytest.mark.parametrize("ws", ["+ ", " 0", "\t.", "()"])
def test_invalid_whitespace(ws):

    with pytest.raises(EvaluatorInitError):
        Evaluator(ws=ws)
