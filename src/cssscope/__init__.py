"""cssscope - prefix the rules of marked CSS regions with a scope class."""

from cssscope.config import DEFAULT_CONFIG, ScopeConfig
from cssscope.model import Diagnostic, Rule, ScopeBlock, Severity
from cssscope.parser import ParseError, UnclosedScopeBlock, UnterminatedComment, parse_rules
from cssscope.prefixer import apply_prefix, prefix_selector
from cssscope.scope import extract_and_rewrite, iter_scope_blocks
from cssscope.validation import ValidationError, validate, validate_or_raise

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "DEFAULT_CONFIG",
    "ScopeConfig",
    "Diagnostic",
    "Rule",
    "ScopeBlock",
    "Severity",
    "ParseError",
    "UnclosedScopeBlock",
    "UnterminatedComment",
    "parse_rules",
    "apply_prefix",
    "prefix_selector",
    "extract_and_rewrite",
    "iter_scope_blocks",
    "ValidationError",
    "validate",
    "validate_or_raise",
]
