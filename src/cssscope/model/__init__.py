from cssscope.model.diagnostic import Diagnostic, Severity
from cssscope.model.rule import Rule, ScopeBlock

__all__ = ["Diagnostic", "Severity", "Rule", "ScopeBlock"]
