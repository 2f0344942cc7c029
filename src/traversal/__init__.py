"""
Vertex traversal engine package.

This package provides:
- Cycle-safe depth-first visitation (iterative or recursive)
- Reachability, maximum value and leaf queries
- Strictly increasing path search
"""

from .visited import IdentitySet
from .engine import MIN_VALUE, MissingVertexError, TraversalEngine, TraversalResult

__all__ = ['IdentitySet', 'MIN_VALUE', 'MissingVertexError', 'TraversalEngine', 'TraversalResult']
