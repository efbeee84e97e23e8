"""
localctx - a terminal assistant with a local context store.
"""

__version__ = "0.1.0"
