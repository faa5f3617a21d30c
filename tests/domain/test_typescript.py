from plotly_typegen.domain.typescript import (
    doc_comment,
    flag_combinations,
    flag_list_union,
    literal,
    literal_union,
    one_or_many,
    union,
    unique,
)


def test_literal_matches_json_stringify():
    assert literal("lines+markers") == '"lines+markers"'
    assert literal(False) == "false"
    assert literal(None) == "null"
    assert literal(0.5) == "0.5"
    assert literal([1, "a"]) == '[1,"a"]'
    assert literal("é") == '"é"'


def test_empty_union_is_never():
    assert union([]) == "never"
    assert literal_union([]) == "never"
    assert union(["A", "B"]) == "A | B"


def test_unique_keeps_first_occurrence_order():
    assert unique(["b", "a", "b", "c", "a"]) == ["b", "a", "c"]


def test_one_or_many_wraps():
    assert one_or_many("number") == "OneOrMany<number>"


def test_flag_combinations_shortest_first_in_declared_order():
    assert flag_combinations(["a", "b", "c"]) == [
        "a",
        "b",
        "c",
        "a+b",
        "a+c",
        "b+c",
        "a+b+c",
    ]


def test_flag_combinations_count_is_full_power_set():
    assert len(flag_combinations(["a", "b", "c", "d", "e"])) == 31
    assert flag_combinations([]) == []


def test_flag_list_union_appends_extras_after_combinations():
    assert (
        flag_list_union(["lines", "markers"], ["none"])
        == '"lines" | "markers" | "lines+markers" | "none"'
    )


def test_doc_comment_with_default():
    assert doc_comment("Sets the opacity.\nBetween 0 and 1.", 1) == "\n".join(
        [
            "/**",
            " * Sets the opacity.",
            " * Between 0 and 1.",
            " * @default 1",
            " */",
        ]
    )


def test_doc_comment_strips_trailing_space_on_blank_lines():
    assert doc_comment("First.\n\nSecond.") == "/**\n * First.\n *\n * Second.\n */"


def test_doc_comment_falsy_default_is_kept():
    assert doc_comment("", False) == "/**\n * @default false\n */"


def test_doc_comment_empty_without_content():
    assert doc_comment("") == ""


def test_doc_comment_escapes_terminator():
    assert "*/ x" not in doc_comment("a */ x")


def test_literal_float_uses_python_exponent_form():
    assert literal(1e-07) == "1e-07"
    assert literal(1.5) == "1.5"
