from sexpread.reader.lexer import Token, TokenType, Tokenizer, lex
from sexpread.reader.parser import Parser, parse, read_all

__all__ = ["Token", "TokenType", "Tokenizer", "lex", "Parser", "parse", "read_all"]
