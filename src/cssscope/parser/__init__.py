from cssscope.parser.errors import ParseError, UnclosedScopeBlock, UnterminatedComment
from cssscope.parser.rules import parse_rules

__all__ = ["parse_rules", "ParseError", "UnclosedScopeBlock", "UnterminatedComment"]
