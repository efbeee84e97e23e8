"""Terminal output helpers for localctx."""
