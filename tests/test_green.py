from enum import IntEnum

import pytest

from sqlcst.cst import GreenNode, GreenToken, Interner, TreeBuilder
from sqlcst.syntax import SyntaxKind


class _Kind(IntEnum):
    EXPR = 200
    WORD = 201


def _build_simple() -> tuple[GreenNode, Interner]:
    builder = TreeBuilder()
    builder.start_node(SyntaxKind.ROOT)
    builder.token(SyntaxKind.COMMENT, "-- a")
    builder.token(SyntaxKind.NEWLINE, "\n")
    builder.start_node(_Kind.EXPR)
    builder.token(_Kind.WORD, "select")
    builder.token(SyntaxKind.WHITESPACE, " ")
    builder.token(_Kind.WORD, "1;")
    builder.finish_node()
    builder.finish_node()
    return builder.finish()


def test_builder_nests_children_in_order() -> None:
    root, _ = _build_simple()

    assert root.kind == SyntaxKind.ROOT
    assert [child.kind for child in root.children] == [
        SyntaxKind.COMMENT,
        SyntaxKind.NEWLINE,
        _Kind.EXPR,
    ]
    expr = root.children[2]
    assert isinstance(expr, GreenNode)
    assert [token.text for token in expr.children if isinstance(token, GreenToken)] == [
        "select",
        " ",
        "1;",
    ]


def test_green_node_text_and_length() -> None:
    root, _ = _build_simple()

    assert root.text() == "-- a\nselect 1;"
    assert root.text_len == len("-- a\nselect 1;")
    assert [token.kind for token in root.tokens()] == [
        SyntaxKind.COMMENT,
        SyntaxKind.NEWLINE,
        _Kind.WORD,
        SyntaxKind.WHITESPACE,
        _Kind.WORD,
    ]


def test_empty_root_is_allowed() -> None:
    builder = TreeBuilder()
    builder.start_node(SyntaxKind.ROOT)
    builder.finish_node()
    root, interner = builder.finish()

    assert root.is_empty
    assert root.text() == ""
    assert len(interner) == 0


def test_repeated_text_shares_key_and_storage() -> None:
    builder = TreeBuilder()
    builder.start_node(SyntaxKind.ROOT)
    builder.token(_Kind.WORD, "".join(["sel", "ect"]))
    builder.token(_Kind.WORD, "".join(["se", "lect"]))
    builder.token(SyntaxKind.WHITESPACE, " ")
    builder.finish_node()
    root, interner = builder.finish()

    first, second, space = root.children
    assert isinstance(first, GreenToken) and isinstance(second, GreenToken)
    assert first.key == second.key
    assert first.text is second.text
    assert isinstance(space, GreenToken) and space.key != first.key
    assert len(interner) == 2
    assert interner.resolve(first.key) == "select"


def test_finish_freezes_interner() -> None:
    _, interner = _build_simple()

    assert interner.is_frozen
    assert interner.get_or_intern("select") == interner.lookup("select")
    with pytest.raises(RuntimeError):
        interner.get_or_intern("never seen")


def test_interner_lookup_and_resolve() -> None:
    interner = Interner()
    key = interner.get_or_intern("--")

    assert "--" in interner
    assert "x" not in interner
    assert interner.lookup("x") is None
    assert interner.resolve(key) == "--"
    with pytest.raises(KeyError):
        interner.resolve(key + 1)


def test_token_without_open_node_is_an_error() -> None:
    builder = TreeBuilder()
    with pytest.raises(RuntimeError):
        builder.token(SyntaxKind.NEWLINE, "\n")


def test_finish_node_without_open_node_is_an_error() -> None:
    with pytest.raises(RuntimeError):
        TreeBuilder().finish_node()


def test_finish_with_open_nodes_is_an_error() -> None:
    builder = TreeBuilder()
    builder.start_node(SyntaxKind.ROOT)
    with pytest.raises(RuntimeError):
        builder.finish()


def test_finish_without_root_is_an_error() -> None:
    with pytest.raises(RuntimeError):
        TreeBuilder().finish()


def test_finish_requires_root_kind() -> None:
    builder = TreeBuilder()
    builder.start_node(_Kind.EXPR)
    builder.finish_node()
    with pytest.raises(RuntimeError):
        builder.finish()


def test_second_top_level_node_is_rejected() -> None:
    builder = TreeBuilder()
    builder.start_node(SyntaxKind.ROOT)
    builder.finish_node()
    with pytest.raises(RuntimeError):
        builder.start_node(SyntaxKind.ROOT)


def test_builder_rejects_calls_after_finish() -> None:
    builder = TreeBuilder()
    builder.start_node(SyntaxKind.ROOT)
    builder.finish_node()
    builder.finish()

    with pytest.raises(RuntimeError):
        builder.start_node(SyntaxKind.ROOT)
    with pytest.raises(RuntimeError):
        builder.finish()


def test_scoped_node_closes_on_exception() -> None:
    builder = TreeBuilder()
    builder.start_node(SyntaxKind.ROOT)

    with pytest.raises(ValueError):
        with builder.node(_Kind.EXPR):
            builder.token(_Kind.WORD, "a")
            raise ValueError("boom")

    assert builder.depth == 1
    builder.finish_node()
    root, _ = builder.finish()
    expr = root.children[0]
    assert isinstance(expr, GreenNode)
    assert expr.kind == _Kind.EXPR
    assert root.text() == "a"


def test_deep_trees_walk_without_recursion() -> None:
    builder = TreeBuilder()
    builder.start_node(SyntaxKind.ROOT)
    for _ in range(5000):
        builder.start_node(_Kind.EXPR)
    builder.token(_Kind.WORD, "x")
    for _ in range(5000):
        builder.finish_node()
    builder.finish_node()
    root, _ = builder.finish()

    assert root.text() == "x"
    assert root.text_len == 1


def _build_deep(depth: int, leaf: str) -> GreenNode:
    builder = TreeBuilder()
    builder.start_node(SyntaxKind.ROOT)
    for _ in range(depth):
        builder.start_node(_Kind.EXPR)
    builder.token(_Kind.WORD, leaf)
    for _ in range(depth):
        builder.finish_node()
    builder.finish_node()
    root, _ = builder.finish()
    return root


def test_deep_trees_compare_without_recursion() -> None:
    left = _build_deep(5000, "x")

    assert left == _build_deep(5000, "x")
    assert hash(left) == hash(_build_deep(5000, "x"))
    assert left != _build_deep(5000, "y")
    assert left != _build_deep(4999, "x")
    assert repr(left) == "GreenNode(ROOT, 1 children)"


def test_node_never_equals_token() -> None:
    root, _ = _build_simple()
    token = GreenToken(kind=_Kind.EXPR, key=0, text="x")

    assert root != token
    assert token != root
