"""
SQL词法分析器

与通用SQL词法器不同，这里保留空白Token：语法对空白位置有严格要求
（关键字后必须有空白、逗号前不允许空白）。
"""

import string
from enum import Enum
from typing import List, NamedTuple


class TokenType(Enum):
    # 关键字（大小写敏感）
    CREATE = "CREATE"
    TABLE = "TABLE"
    DROP = "DROP"
    INSERT = "INSERT"
    INTO = "INTO"
    VALUES = "VALUES"
    SELECT = "SELECT"
    FROM = "FROM"

    # 标识符（同时用于值字面量）
    IDENTIFIER = "IDENTIFIER"

    # 分隔符
    COMMA = ","
    SEMICOLON = ";"
    LEFT_PAREN = "("
    RIGHT_PAREN = ")"
    STAR = "*"

    # 特殊
    WHITESPACE = "WHITESPACE"
    UNKNOWN = "UNKNOWN"
    EOF = "EOF"


class Token(NamedTuple):
    type: TokenType
    value: str
    line: int
    column: int
    position: int

    @property
    def is_word(self) -> bool:
        """关键字也是合法的字母数字串，可以出现在标识符位置"""
        return self.type in WORD_TYPES


WORD_TYPES = frozenset(
    {
        TokenType.IDENTIFIER,
        TokenType.CREATE,
        TokenType.TABLE,
        TokenType.DROP,
        TokenType.INSERT,
        TokenType.INTO,
        TokenType.VALUES,
        TokenType.SELECT,
        TokenType.FROM,
    }
)
IDENTIFIER_CHARS = frozenset(string.ascii_letters + string.digits)
WHITESPACE_CHARS = frozenset(" \t")


class SQLLexer:
    """SQL词法分析器"""

    KEYWORDS = {
        "CREATE": TokenType.CREATE,
        "TABLE": TokenType.TABLE,
        "DROP": TokenType.DROP,
        "INSERT": TokenType.INSERT,
        "INTO": TokenType.INTO,
        "VALUES": TokenType.VALUES,
        "SELECT": TokenType.SELECT,
        "FROM": TokenType.FROM,
    }

    SINGLE_CHARS = {
        ",": TokenType.COMMA,
        ";": TokenType.SEMICOLON,
        "(": TokenType.LEFT_PAREN,
        ")": TokenType.RIGHT_PAREN,
        "*": TokenType.STAR,
    }

    def __init__(self, sql: str):
        self.sql = sql
        self.position = 0
        self.line = 1
        self.column = 1
        self.tokens: List[Token] = []

    def tokenize(self) -> List[Token]:
        """将SQL文本分解为Token列表

        不认识的字符不会立即报错，而是生成UNKNOWN Token，由语法分析器
        在真正需要它的位置报告错误（分号之后的内容不影响语句本身）。
        """
        while self.position < len(self.sql):
            char = self.sql[self.position]

            if char in IDENTIFIER_CHARS:
                self._read_identifier_or_keyword()
            elif char in WHITESPACE_CHARS:
                self._read_whitespace()
            elif char in self.SINGLE_CHARS:
                self._add_single_char_token(self.SINGLE_CHARS[char], char)
            else:
                self._add_single_char_token(TokenType.UNKNOWN, char)
                if char == "\n":
                    self.line += 1
                    self.column = 1

        self._add_token(TokenType.EOF, "")
        return self.tokens

    def _read_whitespace(self):
        """读取连续的空格/制表符"""
        start = self.position
        start_column = self.column
        while self.position < len(self.sql) and self.sql[self.position] in WHITESPACE_CHARS:
            self.position += 1
            self.column += 1
        value = self.sql[start : self.position]
        self.tokens.append(Token(TokenType.WHITESPACE, value, self.line, start_column, start))

    def _read_identifier_or_keyword(self):
        """读取标识符或关键字"""
        start = self.position
        start_column = self.column

        while self.position < len(self.sql) and self.sql[self.position] in IDENTIFIER_CHARS:
            self.position += 1
            self.column += 1

        value = self.sql[start : self.position]
        token_type = self.KEYWORDS.get(value, TokenType.IDENTIFIER)
        self.tokens.append(Token(token_type, value, self.line, start_column, start))

    def _add_token(self, token_type: TokenType, value: str):
        """添加Token（不移动位置）"""
        token = Token(token_type, value, self.line, self.column, self.position)
        self.tokens.append(token)

    def _add_single_char_token(self, token_type: TokenType, char: str):
        """添加单字符Token并移动位置"""
        token = Token(token_type, char, self.line, self.column, self.position)
        self.tokens.append(token)
        self.position += 1
        self.column += 1
