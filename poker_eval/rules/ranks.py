"""Card rank definitions and utilities.

Rank order (low to high): 2 < 3 < 4 < 5 < 6 < 7 < 8 < 9 < 10 < J < Q < K < A

The integer value of a rank is its face value (TWO=2 ... ACE=14) and is the
value used for adjacency tests. The Ace also plays low in a wheel
(A-2-3-4-5), but that role is never encoded as a second number: code that
cares checks for Rank.ACE explicitly.

This module provides:
- Rank and suit definitions
- Card representation and parsing
- Deck and index helpers
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, Iterable, List, Optional


class Rank(IntEnum):
    """Card ranks ordered by strength (higher value = stronger rank)."""

    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14


class Suit(IntEnum):
    """Card suits. Suits carry no strength; the order only makes sorting total."""

    HEART = 0
    DIAMOND = 1
    CLUB = 2
    SPADE = 3


# Rank symbols for display
RANK_SYMBOLS = {
    Rank.TWO: "2",
    Rank.THREE: "3",
    Rank.FOUR: "4",
    Rank.FIVE: "5",
    Rank.SIX: "6",
    Rank.SEVEN: "7",
    Rank.EIGHT: "8",
    Rank.NINE: "9",
    Rank.TEN: "10",
    Rank.JACK: "J",
    Rank.QUEEN: "Q",
    Rank.KING: "K",
    Rank.ACE: "A",
}

# Suit symbols for display
SUIT_SYMBOLS = {
    Suit.HEART: "♥",
    Suit.DIAMOND: "♦",
    Suit.CLUB: "♣",
    Suit.SPADE: "♠",
}

# Symbol to rank mapping (for parsing)
SYMBOL_TO_RANK = {v: k for k, v in RANK_SYMBOLS.items()}
SYMBOL_TO_RANK.update({"T": Rank.TEN, "j": Rank.JACK, "q": Rank.QUEEN, "k": Rank.KING, "a": Rank.ACE})

SYMBOL_TO_SUIT = {v: k for k, v in SUIT_SYMBOLS.items()}
SYMBOL_TO_SUIT.update({"H": Suit.HEART, "D": Suit.DIAMOND, "C": Suit.CLUB, "S": Suit.SPADE})
SYMBOL_TO_SUIT.update({"h": Suit.HEART, "d": Suit.DIAMOND, "c": Suit.CLUB, "s": Suit.SPADE})

NUM_RANKS = len(Rank)
NUM_CARDS = NUM_RANKS * len(Suit)


class CardParseError(ValueError):
    """Raised when a string cannot be parsed into a card."""

    pass


@dataclass(frozen=True, order=True)
class Card:
    """A playing card with rank and suit.

    Cards are ordered by rank first (for sorting hands), then by suit.
    Immutable and hashable for use in sets.
    """

    rank: Rank
    suit: Suit

    def __str__(self) -> str:
        return f"{RANK_SYMBOLS[self.rank]}{SUIT_SYMBOLS[self.suit]}"

    def __repr__(self) -> str:
        return f"Card({RANK_SYMBOLS[self.rank]}{SUIT_SYMBOLS[self.suit]})"

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Parse a card from string like '3♥', '10♠', 'TS' or 'ah'.

        Args:
            s: Card string in format "RANK+SUIT"

        Returns:
            Card object

        Raises:
            CardParseError: If string cannot be parsed
        """
        s = s.strip()
        if len(s) < 2:
            raise CardParseError(f"Card string too short: {s!r}")

        suit_char = s[-1]
        rank_str = s[:-1]

        if suit_char not in SYMBOL_TO_SUIT:
            raise CardParseError(f"Invalid suit character: {suit_char}")
        suit = SYMBOL_TO_SUIT[suit_char]

        if rank_str not in SYMBOL_TO_RANK:
            raise CardParseError(f"Invalid rank: {rank_str}")
        rank = SYMBOL_TO_RANK[rank_str]

        return cls(rank=rank, suit=suit)


def are_consecutive(ranks: List[Rank]) -> bool:
    """Check if a sorted list of unique ranks are consecutive.

    The Ace only counts as high here; wheel handling lives in the
    sequence builder.

    Args:
        ranks: List of ranks (should be sorted and unique)

    Returns:
        True if all ranks are consecutive
    """
    if len(ranks) < 2:
        return True

    for i in range(1, len(ranks)):
        if int(ranks[i]) - int(ranks[i - 1]) != 1:
            return False
    return True


def get_rank_counts(cards: Iterable[Card]) -> Dict[Rank, int]:
    """Count occurrences of each rank in a collection of cards.

    Args:
        cards: Card objects

    Returns:
        Dict mapping Rank to count
    """
    counts: Dict[Rank, int] = {}
    for card in cards:
        counts[card.rank] = counts.get(card.rank, 0) + 1
    return counts


def create_standard_deck() -> List[Card]:
    """Create a standard 52-card deck.

    Returns:
        List of 52 Card objects (13 ranks × 4 suits)
    """
    deck = []
    for suit in Suit:
        for rank in Rank:
            deck.append(Card(rank=rank, suit=suit))
    return deck


def sort_cards(cards: Iterable[Card]) -> List[Card]:
    """Sort cards by rank (ascending), then by suit.

    Args:
        cards: Card objects

    Returns:
        New sorted list of cards
    """
    return sorted(cards)


# Card encoding: 0-51 for standard deck (4 suits × 13 ranks)
# card_idx = suit * 13 + (rank - 2)
def card_to_idx(card: Card) -> int:
    """Convert Card to index 0-51."""
    return card.suit.value * NUM_RANKS + (card.rank.value - Rank.TWO)


def idx_to_card(idx: int) -> Card:
    """Convert index 0-51 to Card."""
    if not 0 <= idx < NUM_CARDS:
        raise ValueError(f"Card index out of range: {idx}")
    suit = Suit(idx // NUM_RANKS)
    rank = Rank(idx % NUM_RANKS + Rank.TWO)
    return Card(rank=rank, suit=suit)


# Helper functions for creating cards for testing


def make_cards_from_ranks(ranks: List[Rank], suits: Optional[List[Suit]] = None) -> List[Card]:
    """Create cards from a list of ranks and optional suits.

    If suits not provided, cycles through suits for variety.

    Args:
        ranks: List of Rank values
        suits: Optional list of Suit values (must match length of ranks if provided)

    Returns:
        List of Card objects
    """
    if suits is None:
        suits = [Suit(i % 4) for i in range(len(ranks))]

    if len(ranks) != len(suits):
        raise ValueError("ranks and suits must have same length")

    return [Card(rank=r, suit=s) for r, s in zip(ranks, suits)]


def make_cards_from_string(s: str) -> List[Card]:
    """Parse cards from a string like "3H 4D 5C 6S 7H".

    Args:
        s: Space-separated card strings

    Returns:
        List of Card objects
    """
    return [Card.from_string(cs) for cs in s.split()]
