"""
/tests/test_lexer.py

词法分析器单元测试
"""
import sys
import os

# 将上级目录（项目根目录）添加到 sys.path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from sql.lexer import SQLLexer, TokenType


def _types_and_values(sql):
    return [(t.type, t.value) for t in SQLLexer(sql).tokenize()]


def test_keywords_identifiers_and_whitespace():
    tokens = _types_and_values("SELECT a,  b FROM t1;")
    assert tokens == [
        (TokenType.SELECT, 'SELECT'),
        (TokenType.WHITESPACE, ' '),
        (TokenType.IDENTIFIER, 'a'),
        (TokenType.COMMA, ','),
        (TokenType.WHITESPACE, '  '),
        (TokenType.IDENTIFIER, 'b'),
        (TokenType.WHITESPACE, ' '),
        (TokenType.FROM, 'FROM'),
        (TokenType.WHITESPACE, ' '),
        (TokenType.IDENTIFIER, 't1'),
        (TokenType.SEMICOLON, ';'),
        (TokenType.EOF, ''),
    ]


def test_keywords_are_case_sensitive():
    tokens = SQLLexer("select From").tokenize()
    assert tokens[0].type == TokenType.IDENTIFIER
    assert tokens[2].type == TokenType.IDENTIFIER
    assert tokens[0].is_word and tokens[2].is_word


def test_identifier_stops_at_non_alphanumeric():
    tokens = _types_and_values("abc_def")
    assert tokens[:3] == [
        (TokenType.IDENTIFIER, 'abc'),
        (TokenType.UNKNOWN, '_'),
        (TokenType.IDENTIFIER, 'def'),
    ]


def test_digits_form_identifiers():
    tokens = _types_and_values("(0, 12a)")
    assert (TokenType.IDENTIFIER, '0') in tokens
    assert (TokenType.IDENTIFIER, '12a') in tokens


def test_tabs_are_whitespace():
    tokens = _types_and_values("DROP\t TABLE")
    assert tokens[1] == (TokenType.WHITESPACE, '\t ')


def test_unknown_characters_do_not_raise():
    tokens = SQLLexer("DROP TABLE t; 'oops").tokenize()
    unknown = [t for t in tokens if t.type == TokenType.UNKNOWN]
    assert unknown[0].value == "'"
    assert unknown[0].position == 14


def test_positions_and_columns():
    tokens = SQLLexer("SELECT *").tokenize()
    star = tokens[2]
    assert star.type == TokenType.STAR
    assert star.position == 7
    assert star.column == 8
    assert tokens[-1].type == TokenType.EOF
    assert tokens[-1].position == 8


def test_separators_are_not_words():
    for token in SQLLexer(",;()*").tokenize():
        assert not token.is_word


def test_empty_input_yields_only_eof():
    assert _types_and_values("") == [(TokenType.EOF, '')]


def main():
    test_keywords_identifiers_and_whitespace()
    test_keywords_are_case_sensitive()
    test_identifier_stops_at_non_alphanumeric()
    test_digits_form_identifiers()
    test_tabs_are_whitespace()
    test_unknown_characters_do_not_raise()
    test_positions_and_columns()
    test_separators_are_not_words()
    test_empty_input_yields_only_eof()
    print("lexer tests passed")


if __name__ == "__main__":
    main()
