"""Centralized script cases used across lexer/parser/grammar tests."""

from __future__ import annotations

import textwrap
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ScriptCase:
    name: str
    source: str
    should_parse_cleanly: bool = True


def _dedent(text: str) -> str:
    return textwrap.dedent(text).lstrip()


CLEAN_CASES: tuple[ScriptCase, ...] = (
    ScriptCase(name="empty", source=""),
    ScriptCase(name="single_statement", source="select * from t;\n"),
    ScriptCase(name="block_comment_then_statement", source="/* c */\nselect 1;"),
    ScriptCase(name="line_comment_then_statement", source="-- hi\nselect 1;"),
    ScriptCase(name="spacing_between_statements", source="select 1;  select 2;"),
    ScriptCase(name="only_trivia", source="  \t\n\n-- nothing here\n/* or here */\n"),
    ScriptCase(name="crlf_newlines", source="select 1;\r\n\r\nselect 2;\r\n"),
    ScriptCase(name="escaped_semicolon", source="insert into t values ('a\\;b');\n"),
    ScriptCase(
        name="multiline_statements",
        source=_dedent(
            """
            select * from contact where id = '123';

            -- test comment

            select wrong statement;

            select id,username from contact

            select id,name
            from contact -- test inline comment
            where id = '123';

            """
        ),
    ),
    ScriptCase(
        name="nested_parentheses",
        source="select count(*) from (select id from t where (a = 1));\n",
    ),
    ScriptCase(name="leading_indentation", source="\tselect 1;\n    select 2;\f\n"),
)

FAILING_CASES: tuple[ScriptCase, ...] = (
    ScriptCase(name="unterminated_statement", source="select 1", should_parse_cleanly=False),
    ScriptCase(
        name="unterminated_after_valid",
        source="select 1;\nselect 2\n",
        should_parse_cleanly=False,
    ),
    ScriptCase(name="unterminated_block_comment", source="select 1;\n/* open", should_parse_cleanly=False),
    ScriptCase(name="garbage_prefix", source="@@ select 1;\n", should_parse_cleanly=False),
    ScriptCase(name="stray_operators", source="select 1; ); select 2;", should_parse_cleanly=False),
    ScriptCase(name="lonely_dash", source="-x;\n", should_parse_cleanly=False),
)

ALL_CASES: tuple[ScriptCase, ...] = CLEAN_CASES + FAILING_CASES


def case_id(case: ScriptCase) -> str:
    return case.name
