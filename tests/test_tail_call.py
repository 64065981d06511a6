import sys

from sprig.types.value import Bool, Int


def test_large_tail_recursive_loop_runs_without_exception(interp):
    """A tail-recursive countdown must not grow the Python stack.

    50000 iterations is far beyond the default recursion limit, so this
    only passes if the trampoline handles the tail call.
    """
    assert sys.getrecursionlimit() < 50000
    interp.eval("(define loop (lambda (n) (if (= n 0) (quote done) (loop (- n 1)))))")
    assert str(interp.eval("(loop 50000)")) == "done"


def test_tail_recursive_accumulator(interp):
    program = """
    (begin
      (define sum-to (lambda (n acc)
        (if (= n 0)
            acc
            (sum-to (- n 1) (+ n acc)))))
      (sum-to 50000 0))
    """
    assert interp.eval(program) == Int(1250025000)


def test_mutual_tail_recursion(interp):
    interp.eval("(define my-even? (lambda (n) (if (= n 0) #t (my-odd? (- n 1)))))")
    interp.eval("(define my-odd? (lambda (n) (if (= n 0) #f (my-even? (- n 1)))))")
    assert interp.eval("(my-even? 30001)") == Bool(False)
    assert interp.eval("(my-odd? 30001)") == Bool(True)


def test_tail_position_in_and_or(interp):
    interp.eval("(define all-down (lambda (n) (or (= n 0) (all-down (- n 1)))))")
    interp.eval("(define still-up (lambda (n) (and (> n 0) (still-up (- n 1)))))")
    assert interp.eval("(all-down 20000)") == Bool(True)
    assert interp.eval("(still-up 20000)") == Bool(False)


def test_tail_call_through_computed_operator(interp):
    interp.eval("(define bounce (lambda (n) ((if (= n 0) list bounce) (- n 1))))")
    assert str(interp.eval("(bounce 20000)")) == "(-1)"
