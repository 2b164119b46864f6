"""
SQL处理层模块
"""

from .lexer import SQLLexer, Token, TokenType
from .parser import SQLParser, parse_query
from .executor import SQLExecutor
from .ast_nodes import (
    Statement,
    CreateTableStatement,
    DropTableStatement,
    InsertStatement,
    SelectStatement,
)
from .errors import (
    ErrorCode,
    SQLError,
    ParseError,
    ExecutionError,
    InvalidSchemaError,
    SchemaMismatchError,
    TableNotFoundError,
)

__all__ = [
    "SQLLexer",
    "SQLParser",
    "SQLExecutor",
    "parse_query",
    "Token",
    "TokenType",
    "Statement",
    "CreateTableStatement",
    "DropTableStatement",
    "InsertStatement",
    "SelectStatement",
    "ErrorCode",
    "SQLError",
    "ParseError",
    "ExecutionError",
    "InvalidSchemaError",
    "SchemaMismatchError",
    "TableNotFoundError",
]
