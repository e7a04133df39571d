import pytest

from algokata.rpn import eval_rpn


def test_eval_rpn_add_then_multiply():
    assert eval_rpn(["2", "1", "+", "3", "*"]) == 9


def test_eval_rpn_division_inside_sum():
    assert eval_rpn(["4", "13", "5", "/", "+"]) == 6


def test_eval_rpn_division_truncates_toward_zero():
    assert eval_rpn(["7", "-2", "/"]) == -3
    assert eval_rpn(["-7", "2", "/"]) == eval_rpn(["7", "-2", "/"])


@pytest.mark.parametrize("a, b", [(3, 4), (-8, 5), (0, 17), (100, -100)])
def test_eval_rpn_binary_operators(a, b):
    assert eval_rpn([str(a), str(b), "+"]) == a + b
    assert eval_rpn([str(a), str(b), "-"]) == a - b
    assert eval_rpn([str(a), str(b), "*"]) == a * b


def test_eval_rpn_operand_order():
    assert eval_rpn(["10", "3", "-"]) == 10 - 3
    assert eval_rpn(["3", "10", "-"]) == 3 - 10


def test_eval_rpn_single_number():
    assert eval_rpn(["-42"]) == -42


def test_eval_rpn_accepts_iterators():
    assert eval_rpn(iter(["6", "2", "/"])) == 6 // 2


def test_eval_rpn_returns_top_of_stack():
    assert eval_rpn(["1", "2"]) == 2


def test_eval_rpn_missing_operand():
    with pytest.raises(ValueError):
        eval_rpn(["1", "+"])


def test_eval_rpn_empty():
    with pytest.raises(ValueError):
        eval_rpn([])


def test_eval_rpn_bad_token():
    with pytest.raises(ValueError):
        eval_rpn(["1", "x", "+"])


def test_eval_rpn_division_by_zero():
    with pytest.raises(ZeroDivisionError):
        eval_rpn(["1", "0", "/"])