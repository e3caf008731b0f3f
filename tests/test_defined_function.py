import pytest

from mdexpr import errors


@pytest.fixture
def define(run):
    def _define(name, params, body):
        run(["___define___", name, params, body])
    return _define


def test_tail_capture_symbol_body(run, define):
    define("list", ["first", "rest"], "rest")
    assert run(["list", "a", "b", "c"]) == "b c"


def test_symbol_body_returns_raw_argument(run, define):
    define("first", ["a", "b"], "a")
    assert run(["first", "x", "y", "z"]) == "x"


def test_tail_argument_named_like_a_parameter_is_not_resolved(run, define):
    define("list", ["first", "rest"], "rest")
    assert run(["list", "a", "first", "c"]) == "first c"


def test_tail_argument_named_like_its_own_parameter(run, define):
    define("echo", ["word"], "word")
    assert run(["echo", "word"]) == "word"
    assert run(["echo", "word", "rest", "word"]) == "word rest word"


def test_middle_argument_named_like_a_parameter_is_raw(run, define):
    define("pick", ["first", "second", "rest"], "second")
    assert run(["pick", "x", "rest", "y"]) == "rest"
    assert run(["pick", "x", "first", "y"]) == "first"


def test_symbol_body_not_a_parameter_is_literal(run, define):
    define("const", ["a"], "fixed")
    assert run(["const", "x"]) == "fixed"


def test_symbol_body_missing_argument_self_quotes(run, define):
    define("second", ["a", "b"], "b")
    assert run(["second", "x"]) == "b"


def test_symbol_body_expression_argument_is_rejected(run, define):
    define("first", ["a", "b"], "a")
    with pytest.raises(errors.MdexprTypeError):
        run(["first", ["x", "y"], "z"])


def test_single_parameter_captures_everything(run, define):
    define("quote", ["text"], [">", "text"])
    assert run(["quote", "to", "be", "or", "not"]) == "> to be or not"


def test_expression_body_mixes_parameters_and_literals(run, define):
    define("pair", ["a", "b"], ["a", "and", "b"])
    assert run(["pair", "x", "y"]) == "x and y"


def test_expression_body_symbol_then_expression_has_no_gap(run, define):
    # symbols are followed by a space, rendered expressions are not
    define("f", ["a", "b"], [["___no_spaces___", "<", "a", ">"], "b"])
    assert run(["f", "x", "y"]) == "<x>y"


def test_expression_body_expression_then_symbol_spacing(run, define):
    define("f", ["a"], ["pre", ["___paren___", "a"], "post"])
    assert run(["f", "x"]) == "pre (x)post"


def test_body_calls_builtin_with_parameter(run, define):
    define("link", ["label", "target"], [["___no_spaces___", "[", "label", "]", ["___paren___", "target"]]])
    assert run(["link", "docs", "index.md"]) == "[docs](index.md)"


def test_tail_capture_renders_nested_argument(run, define):
    define("em", ["text"], [["___no_spaces___", "*", "text", "*"]])
    assert run(["em", "very", ["___paren___", "much"]]) == "*very (much)*"


def test_argument_expression_evaluated_in_body(run, define):
    define("pair", ["a", "b"], ["a", "b"])
    assert run(["pair", ["___paren___", "x"], "y"]) == "(x)y"


def test_missing_arguments_self_quote_in_body(run, define):
    define("pair", ["a", "b"], ["a", "b"])
    assert run(["pair", "x"]) == "x b"


def test_no_parameters_ignores_arguments(run, define):
    define("hr", [], ["---"])
    assert run(["hr", "ignored", "too"]) == "---"


def test_defined_functions_compose(run, define):
    define("greet", ["name"], ["hello", "name"])
    define("shout", ["text"], [["___no_spaces___", "text", "!"]])
    assert run(["shout", ["greet", "world"]]) == "hello world!"


def test_call_inside_text(run, define):
    define("greet", ["name"], ["hello", "name"])
    assert run(["say", ["greet", "world"], "twice"]) == "say hello world twice"


def test_parameter_bindings_do_not_leak_to_caller(run, define):
    define("f", ["name"], ["hi", "name"])
    assert run([["f", "bob"], "name"]) == "hi bob name"


def test_callee_sees_caller_bindings(run, define):
    # values are dynamically scoped through the environment snapshot
    define("inner", [], ["x", "is", "who"])
    define("outer", ["who"], [["inner"]])
    assert run(["outer", "ann"]) == "x is ann"
