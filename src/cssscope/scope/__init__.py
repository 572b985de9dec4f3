from cssscope.scope.extractor import extract_and_rewrite, iter_scope_blocks

__all__ = ["extract_and_rewrite", "iter_scope_blocks"]
