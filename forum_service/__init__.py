"""
Forum Service - in-memory forum backend with posts, comments and votes
"""

__version__ = "1.0.0"
