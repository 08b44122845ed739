import pytest

from kelp.builtin import native_scope, create_root_scope
from kelp.types import Error, Function, Int


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(+)", "0"),
        ("(+ 1 2)", "3"),
        ("(+ 1 2.5)", "3.5"),
        ("(- 5)", "-5"),
        ("(- 10 3 2)", "5"),
        ("(*)", "1"),
        ("(* 2 3 4)", "24"),
        ("(* 2 1.5)", "3.0"),
        ("(/ 7 2)", "3"),
        ("(/ -7 2)", "-3"),
        ("(/ 7.0 2)", "3.5"),
        ("(/ 4)", "0"),
        ("(/ 4.0)", "0.25"),
        ("(mod 7 3)", "1"),
        ("(mod -7 2)", "-1"),
        ("(= 1 1.0)", "true"),
        ("(= 'a 'a)", "true"),
        ("(= (list 1 2) (list 1 2.0))", "true"),
        ("(= \"a\" \"b\")", "false"),
        ("(< 1 2 3)", "true"),
        ("(<= 1 1 2)", "true"),
        ("(> 3 2 2)", "false"),
        ("(>= 3 3 4)", "false"),
        ("(not nil)", "true"),
        ("(not 0)", "false"),
        ("(list 1 2)", "(1 2)"),
        ("(list)", "()"),
        ("(cons 1 (list 2))", "(1 2)"),
        ("(cons 1 nil)", "(1)"),
        ("(first (list 1 2))", "1"),
        ("(first (list))", "nil"),
        ("(first nil)", "nil"),
        ("(rest (list 1 2 3))", "(2 3)"),
        ("(rest nil)", "()"),
        ("(nth (list 1 2 3) 1)", "2"),
        ("(count (list 1 2))", "2"),
        ("(count \"abc\")", "3"),
        ("(empty? (list))", "true"),
        ("(empty? nil)", "true"),
        ("(concat (list 1) nil (list 2 3))", "(1 2 3)"),
        ("(str \"a\" 1 \"b\" nil)", '"a1bnil"'),
        ("(nil? nil)", "true"),
        ("(list? (list))", "true"),
        ("(string? \"x\")", "true"),
        ("(symbol? 'x)", "true"),
        ("(symbol? \"x\")", "false"),
        ("(number? 1.5)", "true"),
        ("(fn? +)", "true"),
        ("(fn? defn)", "false"),
        ("(macro? defn)", "true"),
        ("(error? 1)", "false"),
        ("(error? (error \"boom\"))", "true"),
        ("(error-message (error \"boom\"))", '"boom"'),
    ]
)
def test_builtin_results(interp, source, expected):
    assert interp.rep(source) == expected


@pytest.mark.parametrize(
    "source,message",
    [
        ("(/ 1 0)", "division by zero"),
        ("(/ 1.0 0.0)", "division by zero"),
        ("(mod 1 0)", "division by zero"),
        ("(mod 1.5 2)", "mod expects integers, got 1.5 and 2"),
        ("(+ 1 \"a\")", '+ expects numbers, got "a"'),
        ("(< 1 'b)", "< expects numbers, got b"),
        ("(-)", "- takes at least 1 args, got 0"),
        ("(mod 1)", "mod takes 2 args, got 1"),
        ("(not)", "not takes 1 args, got 0"),
        ("(nth (list 1) 5)", "nth index 5 out of range for (1)"),
        ("(nth (list 1) 'a)", "nth expects an integer index, got a"),
        ("(first 1)", "first expects a list, got 1"),
        ("(cons 1 2)", "cons expects a list, got 2"),
        ("(+ 9223372036854775807 1)", "integer overflow"),
        ("(- -9223372036854775808)", "integer overflow"),
        ("(* 9223372036854775807 2 0)", "integer overflow"),
        ("(* " + "9223372036854775807 " * 17 + "0.5)", "integer overflow"),
        ("(error \"bad \" 42)", "bad 42"),
        ("(error-message 1)", "error-message expects an error, got 1"),
    ]
)
def test_builtin_errors(interp, source, message):
    assert interp.eval(source) == Error(message)


def test_argument_errors_propagate(interp):
    assert interp.eval('(+ 1 (error "inner") (oops))') == Error("inner")
    assert interp.eval("(list 1 undefined-sym 2)") == Error("could not parse symbol: undefined-sym")


def test_arity_checked_before_arguments_run(interp):
    assert interp.eval("(not (def z 1) 2)") == Error("not takes 1 args, got 2")
    assert "z" not in interp.scope.bindings


# -----------------------------------------------------
# Higher-order list operations
# -----------------------------------------------------

@pytest.mark.parametrize(
    "source,expected",
    [
        ("(map (fn (x) (* x x)) (list 1 2 3))", "(1 4 9)"),
        ("(map + nil)", "()"),
        ("(map list (list 1 (list 2)))", "((1) ((2)))"),
        ("(filter number? (list 1 'a 2.5 \"s\"))", "(1 2.5)"),
        ("(reduce + 0 (list 1 2 3))", "6"),
        ("(reduce cons nil (list))", "nil"),
        ("(reduce (fn (acc x) (cons x acc)) (list) (list 1 2 3))", "(3 2 1)"),
    ]
)
def test_higher_order_results(interp, source, expected):
    assert interp.rep(source) == expected


@pytest.mark.parametrize(
    "source,message",
    [
        ("(map 1 (list 1))", "map expects a function, got 1"),
        ("(filter defn (list 1))", "filter expects a function, got #<macro defn>"),
        ("(reduce + 0 2)", "reduce expects a list, got 2"),
        ("(map (list 1))", "map takes 2 args, got 1"),
        ("(map (fn (x y) x) (list 1))", "anonymous takes 2 args, got 1"),
        ("(map (fn (x) (error \"bad \" x)) (list 1 2))", "bad 1"),
        ("(filter (fn (x) (/ 1 x)) (list 1 0))", "division by zero"),
    ]
)
def test_higher_order_errors(interp, source, message):
    assert interp.eval(source) == Error(message)


def test_higher_order_builtins_handle_long_lists(interp):
    numbers = "(list " + " ".join(str(i) for i in range(1000)) + ")"
    interp.eval(f"(def xs {numbers})")
    assert interp.eval("(count (map (fn (x) (+ x 1)) xs))") == Int(1000)
    assert interp.eval("(count (filter (fn (x) (< x 500)) xs))") == Int(500)
    assert interp.eval("(reduce + 0 xs)") == Int(499500)


# -----------------------------------------------------
# Native registry
# -----------------------------------------------------

def test_native_scope_is_built_once():
    assert native_scope() is native_scope()


def test_sessions_share_registry_but_not_bindings():
    a = create_root_scope()
    b = create_root_scope()
    assert a.parent is b.parent is native_scope()
    a.set("x", Int(1))
    assert b.get("x") is None


def test_redefining_a_native_leaves_registry_intact(interp):
    interp.eval("(def + -)")
    assert interp.eval("(+ 5 3)") == Int(2)
    plus = native_scope().get("+")
    assert isinstance(plus, Function) and plus.name == "+"
    from kelp.interpreter import Interpreter
    assert Interpreter(prelude=None).eval("(+ 5 3)") == Int(8)
