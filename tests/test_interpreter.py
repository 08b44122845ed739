import pytest

from kelp.errors import KelpSyntaxError
from kelp.interpreter import Interpreter
from kelp.types import Error, Int, List, NIL


@pytest.fixture
def full():
    """An interpreter with the packaged core prelude."""
    return Interpreter()


def test_empty_source_is_nil(interp):
    assert interp.eval("") == NIL
    assert interp.eval("; nothing here") == NIL


def test_last_result_is_returned(interp):
    assert interp.eval("(def a 1) (def b 2) (+ a b)") == Int(3)
    assert interp.eval_all("1 2") == [Int(1), Int(2)]


def test_state_persists_between_calls(interp):
    interp.eval("(defn twice (x) (* 2 x))")
    assert interp.eval("(twice 21)") == Int(42)


def test_rep_prints(interp):
    assert interp.rep('(str "a" "b")') == '"ab"'
    assert interp.rep("(undefined)") == "error: could not parse symbol: undefined"


def test_syntax_errors_raise(interp):
    with pytest.raises(KelpSyntaxError):
        interp.eval("(+ 1")


def test_no_prelude(interp):
    assert interp.eval("(inc 1)") == Error("could not parse symbol: inc")


def test_string_prelude():
    itp = Interpreter(prelude="(def answer 42)")
    assert itp.eval("answer") == Int(42)


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(inc 1)", "2"),
        ("(dec 1)", "0"),
        ("(identity 'x)", "x"),
        ("(second (list 1 2 3))", "2"),
        ("(map inc (list 1 2 3))", "(2 3 4)"),
        ("(filter (fn (x) (> x 1)) (list 1 2 3))", "(2 3)"),
        ("(reduce + 0 (list 1 2 3))", "6"),
        ("(when true 1 2)", "2"),
        ("(when false 1)", "nil"),
        ("(unless false 3)", "3"),
        ("(cond false 1 nil 2 true 3)", "3"),
        ("(cond false 1)", "nil"),
        ("(cond true)", "error: cond requires an even number of forms"),
    ]
)
def test_core_prelude(full, source, expected):
    assert full.rep(source) == expected


def test_prelude_functions_over_long_lists(full):
    numbers = " ".join(str(i) for i in range(500))
    assert full.eval(f"(count (map inc (list {numbers})))") == Int(500)
    assert full.eval(f"(reduce + 0 (map dec (list {numbers})))") == Int(124750 - 500)


def test_prelude_path_from_env(tmp_path, monkeypatch):
    (tmp_path / "core.lisp").write_text("(def from-env 7)", encoding="utf-8")
    monkeypatch.setenv("KELP_PRELUDE_PATH", str(tmp_path))
    assert Interpreter().eval("from-env") == Int(7)


def test_missing_prelude_is_skipped(tmp_path, monkeypatch):
    monkeypatch.setenv("KELP_PRELUDE_PATH", str(tmp_path))
    assert Interpreter().eval("(list)") == List(())


def test_failing_prelude_form_is_logged(caplog):
    with caplog.at_level("WARNING", logger="kelp.interpreter"):
        Interpreter(prelude="(def ok 1) (broken)")
    assert "could not parse symbol: broken" in caplog.text


def test_user_definitions_shadow_prelude(full):
    full.eval("(defn inc (x) (+ x 100))")
    assert full.eval("(inc 1)") == Int(101)
    assert Interpreter().eval("(inc 1)") == Int(2)
