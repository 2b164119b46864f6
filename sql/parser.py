"""
SQL语法分析器
"""

from typing import Callable, List, Optional, Tuple

from .ast_nodes import (
    CreateTableStatement,
    DropTableStatement,
    InsertStatement,
    SelectStatement,
    Statement,
)
from .errors import ErrorCode, ParseError
from .lexer import SQLLexer, Token, TokenType


class SQLParser:
    """SQL语法分析器

    依次尝试 CREATE TABLE、DROP TABLE、INSERT INTO、SELECT 四种文法，
    第一个完整匹配到分号的文法获胜。分号之后的内容作为剩余输入返回。
    """

    def __init__(self, tokens: List[Token]):
        # 初始化，保存token流和当前位置
        self.tokens = tokens
        self.position = 0
        self.current_token = tokens[0] if tokens else None

    def parse(self) -> Statement:
        """解析SQL语句，忽略分号后的剩余输入"""
        statement, _ = self.parse_with_remainder()
        return statement

    def parse_with_remainder(self) -> Tuple[Statement, str]:
        """按固定顺序尝试各文法，返回第一个成功的语句与剩余输入

        全部失败时，报告消费输入最多的那个文法的错误（相同则取先尝试的）。
        """
        if not self.tokens:
            raise ParseError(ErrorCode.KEYWORD, "CREATE TABLE", "", 0)

        errors: List[ParseError] = []
        for grammar in self._grammars():
            self._reset()
            try:
                statement = grammar()
            except ParseError as e:
                errors.append(e)
                continue
            return statement, self._remainder()

        raise max(errors, key=lambda e: e.position)

    def _grammars(self) -> List[Callable[[], Statement]]:
        return [
            self._parse_create_table,
            self._parse_drop_table,
            self._parse_insert,
            self._parse_select,
        ]

    # ---------------------------------------------------------------- 文法

    def _parse_create_table(self) -> CreateTableStatement:
        """CREATE TABLE ws+ ident ws* ( column_list ) ;"""
        self._expect_keyword("CREATE TABLE")
        self._skip_whitespace(required=True)
        table_name = self._parse_identifier()
        self._skip_whitespace()
        columns = self._parse_parenthesized_list()
        self._expect(TokenType.SEMICOLON, ErrorCode.DELIMITER)
        return CreateTableStatement(table_name, columns)

    def _parse_drop_table(self) -> DropTableStatement:
        """DROP TABLE ws+ ident ;"""
        self._expect_keyword("DROP TABLE")
        self._skip_whitespace(required=True)
        table_name = self._parse_identifier()
        self._expect(TokenType.SEMICOLON, ErrorCode.DELIMITER)
        return DropTableStatement(table_name)

    def _parse_insert(self) -> InsertStatement:
        """INSERT INTO ws+ ident ws* ( column_list ) ws* VALUES ws* ( value_list ) ;"""
        self._expect_keyword("INSERT INTO")
        self._skip_whitespace(required=True)
        table_name = self._parse_identifier()
        self._skip_whitespace()
        columns = self._parse_parenthesized_list()
        self._skip_whitespace()
        self._expect_keyword("VALUES")
        self._skip_whitespace()
        values = self._parse_parenthesized_list()
        self._expect(TokenType.SEMICOLON, ErrorCode.DELIMITER)
        return InsertStatement(table_name, columns, values)

    def _parse_select(self) -> SelectStatement:
        """SELECT ws+ ( * | ( column_list ) | column_list ) ws* FROM ws+ ident ;"""
        self._expect_keyword("SELECT")
        self._skip_whitespace(required=True)

        all_columns = False
        columns: Optional[List[str]] = None
        if self.current_token.type == TokenType.STAR:
            self._advance()
            all_columns = True
        elif self.current_token.type == TokenType.LEFT_PAREN:
            columns = self._parse_parenthesized_list()
        else:
            columns = self._parse_list()

        self._skip_whitespace()
        self._expect_keyword("FROM")
        self._skip_whitespace(required=True)
        table_name = self._parse_identifier()
        self._expect(TokenType.SEMICOLON, ErrorCode.DELIMITER)
        return SelectStatement(table_name, columns=columns, all_columns=all_columns)

    # ---------------------------------------------------------------- 列表

    def _parse_parenthesized_list(self) -> List[str]:
        self._expect(TokenType.LEFT_PAREN, ErrorCode.DELIMITER)
        items = self._parse_list()
        self._expect(TokenType.RIGHT_PAREN, ErrorCode.DELIMITER)
        return items

    def _parse_list(self) -> List[str]:
        """ident ( "," ws* ident )*

        列表元素允许为空（悬挂逗号），由执行器做语义检查；
        单个空元素视为空列表。
        """
        items = [self._parse_identifier(allow_empty=True)]
        while self.current_token.type == TokenType.COMMA:
            self._advance()
            self._skip_whitespace()
            items.append(self._parse_identifier(allow_empty=True))
        if items == [""]:
            return []
        return items

    # ---------------------------------------------------------------- 基础

    def _parse_identifier(self, allow_empty: bool = False) -> str:
        if self.current_token.is_word:
            value = self.current_token.value
            self._advance()
            return value
        if allow_empty:
            return ""
        raise self._error(ErrorCode.IDENTIFIER, "[A-Za-z0-9]+")

    def _expect_keyword(self, phrase: str):
        """匹配关键字短语，短语内部的单词之间恰好一个空格"""
        for i, word in enumerate(phrase.split(" ")):
            if i:
                if self.current_token.type != TokenType.WHITESPACE or self.current_token.value != " ":
                    raise self._error(ErrorCode.KEYWORD, phrase)
                self._advance()
            if self.current_token.type != SQLLexer.KEYWORDS[word]:
                raise self._error(ErrorCode.KEYWORD, phrase)
            self._advance()

    def _skip_whitespace(self, required: bool = False):
        if self.current_token.type == TokenType.WHITESPACE:
            self._advance()
        elif required:
            raise self._error(ErrorCode.WHITESPACE, " ")

    def _expect(self, expected_type: TokenType, code: ErrorCode) -> Token:
        """期望特定类型的token"""
        if self.current_token.type != expected_type:
            raise self._error(code, expected_type.value)
        token = self.current_token
        self._advance()
        return token

    def _advance(self):
        """移动到下一个token"""
        if self.position < len(self.tokens) - 1:
            self.position += 1
            self.current_token = self.tokens[self.position]

    def _reset(self):
        self.position = 0
        self.current_token = self.tokens[0]

    def _remainder(self) -> str:
        return "".join(token.value for token in self.tokens[self.position :])

    def _error(self, code: ErrorCode, expected: str) -> ParseError:
        return ParseError(code, expected, self._remainder(), self.current_token.position)


def parse_query(sql: str) -> Tuple[str, Statement]:
    """解析一条语句，返回 (剩余输入, 语句)"""
    tokens = SQLLexer(sql).tokenize()
    statement, remainder = SQLParser(tokens).parse_with_remainder()
    return remainder, statement
