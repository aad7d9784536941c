"""Card evaluation helpers.

This module provides:
- Card and rank definitions (ranks.py)
- Grouping by rank/suit and n-of-a-kind ranking (grouping.py)
- Longest consecutive-rank sequence detection (sequences.py)
"""

from .ranks import (
    Rank,
    Suit,
    Card,
    CardParseError,
    RANK_SYMBOLS,
    SUIT_SYMBOLS,
    NUM_RANKS,
    NUM_CARDS,
    are_consecutive,
    get_rank_counts,
    create_standard_deck,
    sort_cards,
    card_to_idx,
    idx_to_card,
    make_cards_from_ranks,
    make_cards_from_string,
)

from .grouping import (
    NOfAKind,
    group_cards_by_rank,
    group_cards_by_suit,
    get_n_of_a_kinds,
)

from .sequences import (
    CardSequence,
    SequenceFrozenError,
    get_longest_sequence,
)

__all__ = [
    # Ranks
    "Rank",
    "Suit",
    "Card",
    "CardParseError",
    "RANK_SYMBOLS",
    "SUIT_SYMBOLS",
    "NUM_RANKS",
    "NUM_CARDS",
    "are_consecutive",
    "get_rank_counts",
    "create_standard_deck",
    "sort_cards",
    "card_to_idx",
    "idx_to_card",
    "make_cards_from_ranks",
    "make_cards_from_string",
    # Grouping
    "NOfAKind",
    "group_cards_by_rank",
    "group_cards_by_suit",
    "get_n_of_a_kinds",
    # Sequences
    "CardSequence",
    "SequenceFrozenError",
    "get_longest_sequence",
]
