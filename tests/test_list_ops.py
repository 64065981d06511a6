import pytest

from sprig.errors import SprigArityError, SprigEvalError, SprigNameError, SprigTypeError
from sprig.types.value import Bool, Float, Int, List, Literal


def ints(*ns):
    return List(tuple(Int(n) for n in ns))


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(list)", List(())),
        ("(list 1 2 3)", ints(1, 2, 3)),
        ("(list (+ 1 1) (* 2 2))", ints(2, 4)),
        ("(car (list 1 2 3))", Int(1)),
        ("(cdr (list 1 2 3))", ints(2, 3)),
        ("(cdr (list 1))", List(())),
        ("(cons 0 (list 1 2))", ints(0, 1, 2)),
        ("(cons 1 (quote ()))", ints(1)),
        ("(append (list 1) (list 2 3))", ints(1, 2, 3)),
        ("(append (list) (list))", List(())),
        ("(length (list 1 2 3))", Int(3)),
        ("(length (quote ()))", Int(0)),
        ("(empty? (list))", Bool(True)),
        ("(null? (list 1))", Bool(False)),
        ("(car (cdr (cdr (list 1 2 3))))", Int(3)),
    ]
)
def test_list_primitives(run, source, expected):
    assert run(source) == expected


@pytest.mark.parametrize(
    "source,error,message",
    [
        ("(car (quote ()))", SprigEvalError, "'car' of empty list"),
        ("(cdr (list))", SprigEvalError, "'cdr' of empty list"),
        ("(car 5)", SprigTypeError, "Invalid type for 'car'"),
        ("(car xs)", SprigNameError, "Unknown symbol xs"),
        ("(cons 1 2)", SprigTypeError, "Invalid type for 'cons'"),
        ("(append (list 1) 2)", SprigTypeError, "Invalid type for 'append'"),
        ("(car (list 1) (list 2))", SprigArityError, "'car' takes exactly one argument"),
        ("(cons 1)", SprigArityError, "'cons' takes exactly two arguments"),
    ]
)
def test_list_errors(run, source, error, message):
    with pytest.raises(error) as excinfo:
        run(source)
    assert str(excinfo.value) == message


def test_lists_are_not_mutated(run):
    run("(define xs (list 1 2))")
    run("(define ys (cons 0 xs))")
    assert run("xs") == ints(1, 2)
    assert run("ys") == ints(0, 1, 2)


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(map - (list 1 2 3))", ints(-1, -2, -3)),
        ("(map sqrt (list 4 9))", List((Float(2.0), Float(3.0)))),
        ("(map (lambda (x) (* x x)) (list 1 2 3))", ints(1, 4, 9)),
        ("(map (lambda (x) (if (< x 0) (- x) x)) (list -1 2 -3))", ints(1, 2, 3)),
        ("(map car (list (list 1 2) (list 3)))", ints(1, 3)),
        ("(map quote (list 1 2))", ints(1, 2)),
        ("(map - (list))", List(())),
    ]
)
def test_map(run, source, expected):
    assert run(source) == expected


def test_map_with_named_lambda(run):
    run("(define inc (lambda (n) (+ n 1)))")
    assert run("(map inc (list 1 2 3))") == ints(2, 3, 4)


@pytest.mark.parametrize(
    "source,error",
    [
        ("(map car (list (list 1) (list)))", SprigEvalError),
        ("(map nope (list 1))", SprigNameError),
        ("(map 1 (list 1))", SprigTypeError),
        ("(map - 5)", SprigTypeError),
        ("(map -)", SprigArityError),
    ]
)
def test_map_errors(run, source, error):
    with pytest.raises(error):
        run(source)


def test_map_fib_over_range(interp):
    interp.eval("(define fib (lambda (n) (if (< n 2) 1 (+ (fib (- n 1)) (fib (- n 2))))))")
    interp.eval("(define range (lambda (a b) (if (= a b) (quote ()) (cons a (range (+ a 1) b)))))")
    assert interp.eval("(range 0 5)") == ints(0, 1, 2, 3, 4)
    result = interp.eval("(map fib (range 0 10))")
    assert result == ints(1, 1, 2, 3, 5, 8, 13, 21, 34, 55)
    assert str(result) == "(1 1 2 3 5 8 13 21 34 55)"


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(= 1 1)", True),
        ("(= 1 1.0)", True),
        ("(= 1 2)", False),
        ("(= 1+0i 1)", True),
        ("(= #t #t)", True),
        ("(= #t #f)", False),
        ('(= "a" "a")', True),
        ("(equal? (quote a) (quote a))", True),
        ("(equal? (quote a) (quote b))", False),
        ("(= (list 1 2) (list 1 2))", True),
        ("(= (list 1 2) (list 1 3))", False),
        ("(= (list 1) (list 1 2))", False),
        ("(= (list 1 (list 2)) (list 1 (list 2)))", True),
        ("(= (list 1) (list (quote a)))", False),
        ("(= (quote ()) (list))", True),
    ]
)
def test_equality(run, source, expected):
    assert run(source) == Bool(expected)


@pytest.mark.parametrize(
    "source,error",
    [
        ("(= 1 (quote a))", SprigTypeError),
        ("(= (list 1) 1)", SprigTypeError),
        ('(= "a" (quote a))', SprigTypeError),
        ("(= x 1)", SprigNameError),
        ("(= 1)", SprigArityError),
    ]
)
def test_equality_errors(run, source, error):
    with pytest.raises(error):
        run(source)


def test_quoted_list_elements_are_literals(run):
    assert run("(car (quote (a b)))") == Literal("a")
