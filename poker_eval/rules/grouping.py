"""Grouping of cards by rank and suit, and same-rank strength ordering.

A hand evaluator reads pairs, trips and quads off `get_n_of_a_kinds` and
flush candidates off `group_cards_by_suit`. Neither function decides a hand
category; they only supply ranked evidence.
"""

from dataclasses import dataclass
from typing import Dict, FrozenSet, Iterable, List, Set, Tuple

from .ranks import Card, Rank, Suit, sort_cards, RANK_SYMBOLS


def group_cards_by_rank(cards: Iterable[Card]) -> Dict[Rank, Set[Card]]:
    """Partition cards into buckets keyed by rank.

    Args:
        cards: Card objects (not modified)

    Returns:
        Fresh dict mapping each present Rank to the set of its cards
    """
    grouped: Dict[Rank, Set[Card]] = {}
    for card in cards:
        grouped.setdefault(card.rank, set()).add(card)
    return grouped


def group_cards_by_suit(cards: Iterable[Card]) -> Dict[Suit, Set[Card]]:
    """Partition cards into buckets keyed by suit.

    Args:
        cards: Card objects (not modified)

    Returns:
        Fresh dict mapping each present Suit to the set of its cards
    """
    grouped: Dict[Suit, Set[Card]] = {}
    for card in cards:
        grouped.setdefault(card.suit, set()).add(card)
    return grouped


@dataclass(frozen=True)
class NOfAKind:
    """All cards of one rank.

    Stronger groups have more cards; equal sizes are broken by rank.

    Attributes:
        rank: The shared rank
        cards: Frozenset of the cards of that rank
    """

    rank: Rank
    cards: FrozenSet[Card]

    @classmethod
    def from_cards(cls, cards: Iterable[Card]) -> "NOfAKind":
        """Build a group from cards that must all share one rank."""
        cards = frozenset(cards)
        if not cards:
            raise ValueError("NOfAKind needs at least one card")

        ranks = {card.rank for card in cards}
        if len(ranks) != 1:
            raise ValueError(f"NOfAKind cards must share one rank, got {sorted(ranks)}")

        return cls(rank=ranks.pop(), cards=cards)

    def __len__(self) -> int:
        return len(self.cards)

    def __str__(self) -> str:
        cards_str = " ".join(str(c) for c in sort_cards(self.cards))
        return f"{self.size}x{RANK_SYMBOLS[self.rank]}({cards_str})"

    @property
    def size(self) -> int:
        """Number of cards sharing the rank."""
        return len(self.cards)

    @property
    def strength(self) -> Tuple[int, int]:
        """Sort key: card count first, then rank value."""
        return (self.size, int(self.rank))


def get_n_of_a_kinds(cards: Iterable[Card]) -> List[NOfAKind]:
    """Rank the same-rank groups of a card collection.

    Args:
        cards: Card objects

    Returns:
        One NOfAKind per distinct rank, strongest first. Sizes and ranks
        are jointly unique per group, so the order is total.
    """
    grouped = group_cards_by_rank(cards)
    groups = [NOfAKind(rank=rank, cards=frozenset(rank_cards)) for rank, rank_cards in grouped.items()]
    groups.sort(key=lambda group: group.strength, reverse=True)
    return groups
