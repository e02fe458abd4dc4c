import pytest

from lithp.errors import LithpShapeError, LithpUndefinedSymbol
from lithp.evaluation.evaluator import evaluate
from lithp.types.markers import TRUE, FALSE, UNIT
from lithp.types.procedure import Procedure
from lithp.types.symbol import Symbol


# ------------------ begin ------------------

def test_begin_returns_last_value(run):
    assert run("(begin 1 2 3)") == 3.0
    assert run("(begin (define x 1) (define x 2) x)") == 2.0


def test_begin_empty_is_zero(run):
    assert run("(begin)") == 0.0


def test_begin_evaluates_in_order(run):
    assert run("(begin (define a 2) (define b (* a 5)) b)") == 10.0


# ------------------ define ------------------

def test_define_binds_and_returns_unit(env, run):
    assert run("(define y 100)") is UNIT
    assert env.lookup(Symbol("y")) == 100.0
    assert run("y") == 100.0


def test_define_overwrites(run):
    run("(define y 1)")
    run("(define y (* y 10))")
    assert run("y") == 10.0


@pytest.mark.parametrize(
    "source",
    [
        "(define)",
        "(define x)",
        "(define 1 2)",
        "(define (x) 2)",
        "(define x 1 2)",
    ],
)
def test_define_shape_errors(run, source):
    with pytest.raises(LithpShapeError) as exc_info:
        run(source)
    assert exc_info.value.form_name == "define"


def test_define_value_error_leaves_binding_untouched(run):
    run("(define y 1)")
    with pytest.raises(LithpUndefinedSymbol):
        run("(define y missing)")
    assert run("y") == 1.0


# ------------------ if ------------------

def test_if_selects_branch(run):
    assert run("(if (= 1 1) 10 20)") == 10.0
    assert run("(if (= 1 2) 10 20)") == 20.0
    assert run("(if #t 1 2)") == 1.0
    assert run("(if #f 1 2)") == 2.0


@pytest.mark.parametrize("test_expr", ["0", "(quote ())", "(quote f)", "(lambda () 1)", "*"])
def test_everything_but_false_is_truthy(run, test_expr):
    assert run(f"(if {test_expr} 1 2)") == 1.0


def test_if_never_evaluates_untaken_branch(run):
    assert run("(if #t 1 undefined-thing)") == 1.0
    assert run("(if #f undefined-thing 2)") == 2.0
    assert run("(if #t 1 (define leaked 1))") == 1.0
    with pytest.raises(LithpUndefinedSymbol):
        run("leaked")


@pytest.mark.parametrize("source", ["(if)", "(if #t)", "(if #t 1)", "(if #t 1 2 3)"])
def test_if_shape_errors(run, source):
    with pytest.raises(LithpShapeError) as exc_info:
        run(source)
    assert exc_info.value.form_name == "if"


def test_if_missing_alternative_checked_before_test(run):
    # Shape is validated up front, so the test expression is not evaluated
    with pytest.raises(LithpShapeError):
        run("(if (define touched 1) 1)")
    with pytest.raises(LithpUndefinedSymbol):
        run("touched")


# ------------------ lambda ------------------

def test_lambda_builds_procedure(env):
    proc = evaluate([Symbol("lambda"), [Symbol("a"), Symbol("b")], Symbol("a")], env)
    assert isinstance(proc, Procedure)
    assert proc.formals == [Symbol("a"), Symbol("b")]
    assert proc.body == Symbol("a")
    assert proc.env is env


def test_lambda_body_not_evaluated_at_creation(run):
    proc = run("(lambda () undefined-thing)")
    assert isinstance(proc, Procedure)


def test_lambda_without_params(run):
    run("(define seven (lambda () 7))")
    assert run("(seven)") == 7.0


@pytest.mark.parametrize(
    "source",
    [
        "(lambda)",
        "(lambda (x))",
        "(lambda x x)",
        "(lambda (x 1) x)",
        "(lambda ((x)) x)",
        "(lambda (x) x x)",
    ],
)
def test_lambda_shape_errors(run, source):
    with pytest.raises(LithpShapeError) as exc_info:
        run(source)
    assert exc_info.value.form_name == "lambda"


# ------------------ quote ------------------

def test_quote_returns_operand(run):
    assert run("(quote a)") == Symbol("a")
    assert run("(quote 1)") == 1.0
    assert run("(quote (1 2 3))") == [1.0, 2.0, 3.0]
    assert run("(quote ())") == []


@pytest.mark.parametrize("source", ["(quote)", "(quote a b)"])
def test_quote_shape_errors(run, source):
    with pytest.raises(LithpShapeError) as exc_info:
        run(source)
    assert exc_info.value.form_name == "quote"


def test_boolean_markers_are_self_bound(run):
    assert run("#t") == TRUE
    assert run("#f") == FALSE
