"""Poker Eval - card evaluation helpers.

Building blocks for a poker hand evaluator: longest consecutive-rank
sequences with Ace-low/Ace-high handling, and rank/suit groupings.
"""

__version__ = "0.1.0"
__author__ = "Poker Eval Team"

from poker_eval.utils.seeding import set_seed

__all__ = ["__version__", "set_seed"]
