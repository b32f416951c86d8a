import pytest

from conslisp.errors import MalformedFormError, ParseError, RecursionDepthError, UnboundSymbolError
from conslisp.types.lambda_fn import Lambda
from conslisp.types.nil import Nil


# ------------------ if ------------------

@pytest.mark.parametrize(
    "source,expected",
    [
        ("(if (<= 1 2) 10 20)", 10),
        ("(if (<= 2 1) 10 20)", 20),
        ("(if 0 10 20)", 20),
        ("(if 1 10 20)", 10),
        ("(if + 10 20)", 10),
        ("(if (- 3 3) 10 20)", 20),
    ]
)
def test_if(interp, source, expected):
    assert interp.run(source) == expected


def test_if_only_evaluates_selected_branch(interp):
    assert interp.run("(if (<= 1 2) 1 (undefined-branch))") == 1
    assert interp.run("(if (<= 2 1) (undefined-branch) 2)") == 2


@pytest.mark.parametrize(
    "source,message",
    [
        ("(if (<= 1 2))", "true-branch"),
        ("(if (<= 1 2) 1)", "false-branch"),
        ("(if)", "test expression"),
    ]
)
def test_if_missing_slots(interp, source, message):
    with pytest.raises(MalformedFormError, match=message):
        interp.run(source)


# ------------------ def ------------------

def test_def_returns_and_binds(interp):
    assert interp.run("(def a (+ 1 2))") == 3
    assert interp.context.lookup("a") == 3
    assert interp.run("(+ a 1)") == 4


def test_def_zero_is_a_value(interp):
    assert interp.run("(def z 0) (+ z 5)") == 5


def test_def_shadows_builtin(interp):
    assert interp.run("(def + (lambda (a b) (- a b))) (+ 10 3)") == 7


def test_def_evaluates_body_once(interp):
    interp.run("(def n 1)")
    assert interp.run("(def n (+ n 1)) n") == 2


@pytest.mark.parametrize(
    "source,message",
    [
        ("(def (a) 1)", "function name"),
        ("(def a)", "function body"),
        ("(def)", "function name"),
    ]
)
def test_def_malformed(interp, source, message):
    with pytest.raises(MalformedFormError, match=message):
        interp.run(source)


# ------------------ lambda ------------------

def test_lambda_returns_callable(interp):
    fn = interp.run("(lambda (x) (+ x 1))")
    assert isinstance(fn, Lambda)
    assert callable(fn)


def test_lambda_application(interp):
    assert interp.run("(def addone (lambda (x) (+ x 1))) (addone 5)") == 6


def test_immediate_lambda_application(interp):
    assert interp.run("((lambda (a b) (- a b)) 9 4)") == 5


def test_lambda_body_is_implicit_begin(interp):
    assert interp.run("((lambda (x) (def y (+ x 1)) (+ y y)) 2)") == 6


def test_lambda_body_not_evaluated_until_called(interp):
    assert isinstance(interp.run("(lambda (x) (undefined-body))"), Lambda)


def test_recursion(interp):
    source = """
    (def sum-to (lambda (n)
      (if (<= n 0)
          0
          (+ n (sum-to (- n 1))))))
    (sum-to 10)
    """
    assert interp.run(source) == 55


def test_undefined_primitive_in_body(interp):
    with pytest.raises(UnboundSymbolError, match=r"Undefined value: \*"):
        interp.run("(def square (lambda (x) (* x x))) (square 3)")


def test_lambda_def_does_not_leak(interp):
    interp.run("(def f (lambda (x) (def inner x)))")
    assert interp.run("(f 4)") == 4
    with pytest.raises(UnboundSymbolError, match="inner"):
        interp.run("(+ inner)")


def test_parameters_shadow_caller_bindings(interp):
    assert interp.run("(def x 100) (def f (lambda (x) (+ x 1))) (+ (f 1) x)") == 102


def test_lambda_sees_call_time_bindings(interp):
    # No lexical capture: free names resolve in the caller's context
    source = """
    (def get-k (lambda (unused) k))
    (def k 1)
    (def call-with-k (lambda (k) (get-k 0)))
    (+ (get-k 0) (call-with-k 40))
    """
    assert interp.run(source) == 41


def test_missing_argument_is_unbound(interp):
    with pytest.raises(UnboundSymbolError, match="Undefined value: b"):
        interp.run("((lambda (a b) (+ a b)) 1)")


def test_missing_argument_falls_back_to_builtin(interp):
    fn = interp.run("((lambda (+) +))")
    assert fn is not Nil
    assert callable(fn)


def test_extra_arguments_are_ignored(interp):
    assert interp.run("((lambda (a) a) 1 2 3)") == 1


def test_arguments_evaluated_in_call_context(interp):
    with pytest.raises(UnboundSymbolError, match="nope"):
        interp.run("((lambda (a) 1) nope)")


@pytest.mark.parametrize("source", ["((lambda x x) 1)", "((lambda (a (b)) a) 1)"])
def test_lambda_bad_parameter_list(interp, source):
    with pytest.raises(MalformedFormError, match="Expected argument list"):
        interp.run(source)


def test_lambda_without_params(interp):
    with pytest.raises(MalformedFormError, match="parameter list"):
        interp.run("(lambda)")


def test_lambda_without_body_fails_when_called(interp):
    fn = interp.run("(lambda (x))")
    assert isinstance(fn, Lambda)
    with pytest.raises(MalformedFormError, match="at least one form"):
        interp.run("((lambda (x)) 1)")


# ------------------ begin ------------------

def test_begin_returns_last(interp):
    assert interp.run("(begin (def a 1) (def b 2) (+ a b))") == 3


def test_begin_empty(interp):
    with pytest.raises(MalformedFormError, match="at least one form"):
        interp.run("(begin)")


def test_top_level_forms_share_context(interp):
    assert interp.run("(def a 1) (def b (+ a 1)) (+ a b)") == 3
    assert interp.run("(+ a b 1)") == 4


# ------------------ size and depth ------------------

SUM_TO = "(def s (lambda (n) (if (<= n 0) 0 (+ n (s (- n 1))))))"


def test_long_argument_list(interp):
    assert interp.run("(+ " + "1 " * 2000 + ")") == 2000


def test_many_top_level_forms(interp):
    assert interp.run(" ".join(["(+ 1)"] * 1500)) == 1


def test_runaway_recursion_is_reported(interp):
    with pytest.raises(RecursionDepthError, match="Recursion too deep"):
        interp.run(SUM_TO + " (s 100000)")


def test_deeply_nested_forms_are_reported(interp):
    with pytest.raises(ParseError, match="nested too deeply"):
        interp.run("(+ " * 5000 + "1" + ")" * 5000)
