from cssscope.prefixer.policy import PREFIX_POLICIES, PrefixPolicy, prefix_selector
from cssscope.prefixer.prefixer import apply_prefix

__all__ = ["apply_prefix", "prefix_selector", "PrefixPolicy", "PREFIX_POLICIES"]
