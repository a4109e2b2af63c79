"""Tests for the TypeScript/TSX sniffing heuristic."""

import pytest

from tokenizors.core.sniff import SourceKind, detect_source_kind


@pytest.mark.parametrize(
    "code",
    [
        "function add(a: number, b: number) { return a + b; }",
        "let name: string = 'x';",
        "const items: Item[] = [];",
        "interface Props { title: string }",
        "type Id = string | number;",
        "enum Color { Red, Green }",
        "const el = <div className=\"box\">hi</div>;",
        "function App() { return <Header />; }",
        "const frag = <>text</>;",
    ],
    ids=[
        "param-annotations",
        "variable-annotation",
        "array-annotation",
        "interface",
        "type-alias",
        "enum",
        "jsx-element",
        "jsx-self-closing",
        "jsx-fragment",
    ],
)
def test_typescript_markers(code: str) -> None:
    assert detect_source_kind(code) is SourceKind.TYPESCRIPT


@pytest.mark.parametrize(
    "code",
    [
        "function add(a, b) { return a + b; }",
        "const o = { a: 1, b: 'two' };",
        "if (a < b && c > d) { run(); }",
        "const v = flag ? left : right;",
        "// interfaces are not declared here\nvar x = 1;",
        "",
    ],
    ids=["plain-function", "object-literal", "comparisons", "ternary", "word-in-comment", "empty"],
)
def test_plain_javascript(code: str) -> None:
    assert detect_source_kind(code) is SourceKind.JAVASCRIPT


def test_object_literal_with_capitalised_value_is_treated_as_typescript() -> None:
    """Known false positive: ``{a: Foo, ...}`` reads like an annotation."""
    assert detect_source_kind("const o = {a: Foo, b: 1};") is SourceKind.TYPESCRIPT
