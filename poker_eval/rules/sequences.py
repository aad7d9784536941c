"""Longest run of consecutive ranks in a set of cards.

A run is stored as a CardSequence: an ordered list of slots, each slot the
set of cards that can fill that position. Two sixes that both extend a run
share one slot, so a later straight-flush check can still pick the suited
one.

The Ace plays low in a wheel (A-2-3-4-5) and high in a broadway
(10-J-Q-K-A). Cards are scanned in ascending rank order, so Aces always come
last; each Ace is then offered to every sequence built so far rather than
being given two numeric values.
"""

import logging
from typing import FrozenSet, Iterable, Iterator, List, Optional, Set

from .ranks import Card, Rank, sort_cards

logger = logging.getLogger(__name__)


class SequenceFrozenError(RuntimeError):
    """Raised when a sequence is modified after it has been returned."""

    pass


class CardSequence:
    """Ordered slots of same-rank cards with ascending consecutive ranks.

    Slot ranks increase by exactly one from slot to slot, except for the
    wheel layout where slot 0 holds Aces playing low before a slot of twos.
    Sequences are mutable while the builder works on them and frozen once
    returned.
    """

    def __init__(self) -> None:
        self._slots: List[Set[Card]] = []
        self._frozen = False

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    def _check_mutable(self) -> None:
        if self._frozen:
            raise SequenceFrozenError(f"Sequence {self} is read-only")

    def _check_slot_rank(self, slot: Set[Card], card: Card) -> None:
        rank = next(iter(slot)).rank
        if card.rank != rank:
            raise ValueError(f"Cannot add {card} to a slot of rank {rank.name}")

    def append_card(self, card: Card) -> None:
        """Add a new slot holding `card` after the last slot."""
        self._check_mutable()
        self._slots.append({card})

    def prepend_card(self, card: Card) -> None:
        """Add a new slot holding `card` before the first slot."""
        self._check_mutable()
        self._slots.insert(0, {card})

    def add_card_to_first_slot(self, card: Card) -> None:
        """Add a same-rank alternative to the first slot."""
        self._check_mutable()
        if not self._slots:
            raise IndexError("Cannot add to the first slot of an empty sequence")
        self._check_slot_rank(self._slots[0], card)
        self._slots[0].add(card)

    def add_card_to_last_slot(self, card: Card) -> None:
        """Add a same-rank alternative to the last slot."""
        self._check_mutable()
        if not self._slots:
            raise IndexError("Cannot add to the last slot of an empty sequence")
        self._check_slot_rank(self._slots[-1], card)
        self._slots[-1].add(card)

    def freeze(self) -> "CardSequence":
        """Make the sequence read-only and return it."""
        self._frozen = True
        return self

    # ------------------------------------------------------------------
    # Inspection
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._slots)

    def __iter__(self) -> Iterator[FrozenSet[Card]]:
        for slot in self._slots:
            yield frozenset(slot)

    def __str__(self) -> str:
        slots_str = " ".join("/".join(str(c) for c in sort_cards(slot)) for slot in self._slots)
        return f"[{slots_str}]"

    def __repr__(self) -> str:
        return f"CardSequence({self})"

    @property
    def length(self) -> int:
        """Number of slots (rank positions) in the sequence."""
        return len(self._slots)

    @property
    def is_empty(self) -> bool:
        return not self._slots

    @property
    def is_frozen(self) -> bool:
        return self._frozen

    @property
    def first_rank(self) -> Optional[Rank]:
        """Rank of the first slot, or None for an empty sequence."""
        if not self._slots:
            return None
        return next(iter(self._slots[0])).rank

    @property
    def last_rank(self) -> Optional[Rank]:
        """Rank of the last slot, or None for an empty sequence."""
        if not self._slots:
            return None
        return next(iter(self._slots[-1])).rank

    @property
    def is_wheel(self) -> bool:
        """True if the sequence starts with an Ace playing low."""
        return len(self._slots) >= 2 and self.first_rank == Rank.ACE and self.ranks()[1] == Rank.TWO

    def cards_at(self, index: int) -> FrozenSet[Card]:
        """All cards that can fill the slot at `index`."""
        return frozenset(self._slots[index])

    def any_card_at(self, index: int) -> Card:
        """One card of the slot at `index` (the lowest by suit order)."""
        return min(self._slots[index])

    def ranks(self) -> List[Rank]:
        """Slot ranks in sequence order."""
        return [next(iter(slot)).rank for slot in self._slots]

    def cards(self) -> FrozenSet[Card]:
        """Every card held by any slot."""
        return frozenset(card for slot in self._slots for card in slot)


def _place_ace(ace: Card, sequences: List[CardSequence]) -> bool:
    """Offer an Ace to every sequence built so far.

    Returns:
        True if at least one sequence took the Ace
    """
    placed = False
    for sequence in sequences:
        if sequence.is_empty:
            continue

        if sequence.first_rank == Rank.TWO:
            # Ace low, completing a possible wheel
            sequence.prepend_card(ace)
        elif sequence.first_rank == Rank.ACE:
            # checked before the King end: a 2-K run already playing an Ace low
            # keeps every further Ace in its first slot
            sequence.add_card_to_first_slot(ace)
        elif sequence.last_rank == Rank.KING:
            # Ace high, completing a possible broadway
            sequence.append_card(ace)
        elif sequence.last_rank == Rank.ACE:
            sequence.add_card_to_last_slot(ace)
        else:
            continue
        placed = True
    return placed


def _select_longest(candidates: List[CardSequence]) -> Optional[CardSequence]:
    """Pick the longest candidate, then the higher last rank, then the earliest built."""
    longest = None
    for sequence in candidates:
        if sequence.is_empty:
            continue
        if longest is None or len(sequence) > len(longest):
            longest = sequence
        elif len(sequence) == len(longest) and sequence.last_rank > longest.last_rank:
            longest = sequence
    return longest


def get_longest_sequence(cards: Iterable[Card]) -> CardSequence:
    """Find the longest run of consecutive ranks.

    Cards of equal rank that extend the same run share a slot. Ties in
    length go to the run with the higher last rank, and remaining ties to
    the run that was started first.

    Args:
        cards: Card objects (not modified)

    Returns:
        Frozen CardSequence. Empty (falsy) only when `cards` is empty. If
        the only cards are Aces they form a single slot.
    """
    candidates: List[CardSequence] = []
    current = CardSequence()
    aces: List[Card] = []

    for card in sort_cards(cards):
        if card.rank == Rank.ACE:
            aces.append(card)
            if not _place_ace(card, candidates + [current]):
                logger.debug("No sequence takes %s", card)
        elif current.is_empty:
            current.append_card(card)
        elif card.rank == current.last_rank + 1:
            current.append_card(card)
        elif card.rank == current.last_rank:
            current.add_card_to_last_slot(card)
        else:
            logger.debug("Closed sequence %s", current)
            candidates.append(current)
            current = CardSequence()
            current.append_card(card)

    candidates.append(current)

    longest = _select_longest(candidates)
    if longest is None:
        longest = CardSequence()
        for ace in aces:
            if longest.is_empty:
                longest.append_card(ace)
            else:
                longest.add_card_to_last_slot(ace)

    logger.debug("Longest sequence %s out of %d candidates", longest, len(candidates))
    return longest.freeze()
