from minilisp.reader.lexer import lex
from minilisp.reader.parser import parse, read

__all__ = ["lex", "parse", "read"]
