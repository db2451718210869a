"""
Delivery: rich rendering for the terminal quiz.
"""

from . import visuals

__all__ = ["visuals"]
