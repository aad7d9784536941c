"""Tests for longest consecutive-rank sequence detection.

Test coverage:
- Plain runs, wheel (Ace low) and broadway (Ace high)
- Equal-length runs: higher last rank wins, then the earliest built
- Same-rank cards sharing a slot, including Aces
- Degenerate input: empty, Aces only, unattached Aces
- Returned sequences are read-only
"""

import pytest
from poker_eval.rules import (
    Rank,
    Suit,
    Card,
    CardSequence,
    SequenceFrozenError,
    create_standard_deck,
    get_longest_sequence,
    make_cards_from_string,
)
from poker_eval.rules.sequences import _select_longest


def _cards(s):
    return set(make_cards_from_string(s))


def _card(s):
    return Card.from_string(s)


class TestStraightDetection:
    """Runs without an Ace."""

    def test_straight_detection(self):
        result = get_longest_sequence(_cards("5C 4H TC JD 6H 3H 7S"))

        assert len(result) == 5
        assert result.any_card_at(0) == _card("3H")
        assert result.any_card_at(1) == _card("4H")
        assert result.any_card_at(2) == _card("5C")
        assert result.any_card_at(3) == _card("6H")
        assert result.any_card_at(4) == _card("7S")

    def test_concurrent_sequence_detection(self):
        result = get_longest_sequence(_cards("QC JH 8C KD 6H 2H 7S"))

        assert len(result) == 3
        for slot in result:
            assert len(slot) == 1
        assert result.any_card_at(0) == _card("JH")
        assert result.any_card_at(1) == _card("QC")
        assert result.any_card_at(2) == _card("KD")

    def test_longer_run_beats_higher_run(self):
        result = get_longest_sequence(_cards("2C 3D 4H 5S QC KD"))
        assert result.ranks() == [Rank.TWO, Rank.THREE, Rank.FOUR, Rank.FIVE]

    def test_single_card(self):
        result = get_longest_sequence(_cards("9D"))
        assert len(result) == 1
        assert result.cards() == _cards("9D")

    def test_no_adjacent_ranks_picks_highest_card(self):
        result = get_longest_sequence(_cards("2C 5D 9H QS"))
        assert result.ranks() == [Rank.QUEEN]


class TestSharedSlots:
    """Same-rank cards that extend one run share its slot."""

    def test_multiple_card_straight_detection(self):
        result = get_longest_sequence(_cards("5C 8H 9C 6D 6H AH 7S"))

        assert len(result) == 5
        assert result.cards_at(0) == _cards("5C")
        assert result.cards_at(1) == _cards("6D 6H")
        assert result.cards_at(2) == _cards("7S")
        assert result.cards_at(3) == _cards("8H")
        assert result.cards_at(4) == _cards("9C")

    def test_shared_first_slot(self):
        result = get_longest_sequence(_cards("5C 5H 6D 7S 8H 9C"))
        assert result.cards_at(0) == _cards("5C 5H")
        assert len(result) == 5

    def test_shared_slots_do_not_add_length(self):
        result = get_longest_sequence(_cards("4C 4D 4H 4S 5C"))
        assert len(result) == 2
        assert result.cards_at(0) == _cards("4C 4D 4H 4S")


class TestAceHandling:
    """Aces complete wheels and broadways."""

    def test_wheel_detection(self):
        result = get_longest_sequence(_cards("5C 3H AC KD AH 4H 2S"))

        assert len(result) == 5
        assert result.cards_at(0) == _cards("AH AC")
        assert result.any_card_at(1) == _card("2S")
        assert result.any_card_at(2) == _card("3H")
        assert result.any_card_at(3) == _card("4H")
        assert result.any_card_at(4) == _card("5C")
        assert result.is_wheel
        assert result.last_rank == Rank.FIVE

    def test_broadway_detection(self):
        result = get_longest_sequence(_cards("TC JD QH KS AC 4D"))

        assert result.ranks() == [Rank.TEN, Rank.JACK, Rank.QUEEN, Rank.KING, Rank.ACE]
        assert not result.is_wheel

    def test_broadway_keeps_every_ace(self):
        result = get_longest_sequence(_cards("TC JD QH KS AC AD AS"))
        assert len(result) == 5
        assert result.cards_at(4) == _cards("AC AD AS")

    def test_broadway_beats_wheel_of_equal_length(self):
        result = get_longest_sequence(_cards("AC 2D 3H 4S 5C TC JD QH KS"))

        assert len(result) == 5
        assert result.last_rank == Rank.ACE

    def test_second_ace_reaches_every_sequence(self):
        cards = _cards("AC AH 2D 3H 4S 5C 6D JD QH KS")
        result = get_longest_sequence(cards)

        # the wheel is longer here, and must hold both Aces
        assert len(result) == 6
        assert result.is_wheel
        assert result.cards_at(0) == _cards("AC AH")

    def test_ace_completes_short_run(self):
        result = get_longest_sequence(_cards("KH AS 7C"))
        assert result.ranks() == [Rank.KING, Rank.ACE]

    def test_unattached_ace_is_ignored(self):
        result = get_longest_sequence(_cards("AS 7D"))
        assert result.cards() == _cards("7D")

    def test_aces_only(self):
        result = get_longest_sequence(_cards("AS AH"))

        assert len(result) == 1
        assert result.cards_at(0) == _cards("AS AH")

    def test_all_thirteen_ranks_play_ace_low(self):
        cards = {Card(rank, Suit.CLUB) for rank in Rank}
        result = get_longest_sequence(cards)

        assert len(result) == 13
        assert result.is_wheel
        assert result.last_rank == Rank.KING

    def test_all_thirteen_ranks_keep_second_ace_low(self):
        cards = {Card(rank, Suit.CLUB) for rank in Rank} | {_card("AH")}
        result = get_longest_sequence(cards)

        assert len(result) == 13
        assert result.cards_at(0) == _cards("AC AH")
        assert result.ranks().count(Rank.ACE) == 1
        assert result.last_rank == Rank.KING

    def test_full_deck(self):
        deck = set(create_standard_deck())
        result = get_longest_sequence(deck)

        assert len(result) == 13
        assert result.is_wheel
        assert result.cards_at(0) == _cards("AC AD AH AS")
        assert result.last_rank == Rank.KING
        assert result.cards() == deck


class TestDegenerateInput:
    """Empty input and read-only results."""

    def test_empty_input(self):
        result = get_longest_sequence(set())

        assert len(result) == 0
        assert not result
        assert result.is_empty
        assert result.first_rank is None
        assert result.last_rank is None

    def test_accepts_any_iterable(self):
        assert len(get_longest_sequence(make_cards_from_string("2C 3C"))) == 2
        assert len(get_longest_sequence(iter([]))) == 0

    def test_result_is_frozen(self):
        result = get_longest_sequence(_cards("2C 3C"))

        assert result.is_frozen
        with pytest.raises(SequenceFrozenError):
            result.append_card(_card("4C"))
        with pytest.raises(SequenceFrozenError):
            result.add_card_to_last_slot(_card("3D"))

    def test_input_not_modified(self):
        cards = _cards("2C 3C AH")
        snapshot = set(cards)
        get_longest_sequence(cards)
        assert cards == snapshot

    def test_idempotent(self):
        cards = _cards("5C 3H AC KD AH 4H 2S 2D")
        assert list(get_longest_sequence(cards)) == list(get_longest_sequence(cards))


class TestCardSequence:
    """Direct construction of sequences."""

    def test_slot_rank_is_enforced(self):
        sequence = CardSequence()
        sequence.append_card(_card("2C"))

        with pytest.raises(ValueError):
            sequence.add_card_to_last_slot(_card("3C"))
        with pytest.raises(ValueError):
            sequence.add_card_to_first_slot(_card("3C"))

    def test_adding_to_empty_sequence(self):
        with pytest.raises(IndexError):
            CardSequence().add_card_to_first_slot(_card("2C"))
        with pytest.raises(IndexError):
            CardSequence().add_card_to_last_slot(_card("2C"))

    def test_prepend(self):
        sequence = CardSequence()
        sequence.append_card(_card("2C"))
        sequence.prepend_card(_card("AD"))

        assert sequence.ranks() == [Rank.ACE, Rank.TWO]
        assert sequence.is_wheel

    def test_str(self):
        sequence = CardSequence()
        sequence.append_card(_card("6D"))
        sequence.add_card_to_last_slot(_card("6H"))
        sequence.append_card(_card("7S"))

        assert str(sequence) == "[6♥/6♦ 7♠]"
        assert repr(sequence) == "CardSequence([6♥/6♦ 7♠])"

    def test_any_card_at_is_deterministic(self):
        sequence = CardSequence()
        sequence.append_card(_card("6S"))
        sequence.add_card_to_last_slot(_card("6H"))
        assert sequence.any_card_at(0) == _card("6H")

    def test_full_tie_goes_to_earliest_built(self):
        first = CardSequence()
        first.append_card(_card("8C"))
        first.append_card(_card("9C"))
        second = CardSequence()
        second.append_card(_card("8D"))
        second.append_card(_card("9D"))

        assert _select_longest([first, second]) is first
        assert _select_longest([second, first]) is second

    def test_select_skips_empty(self):
        assert _select_longest([CardSequence()]) is None
