"""
Unit tests for Card and the card catalog.

Tests validation of ranks, suits and combinations, catalog order,
and Card construction failures.
"""

import pytest
from src.deck_engine.card import (
    Card, Combination, Rank, Suit,
    all_combinations, validate_combination, validate_rank, validate_suit,
)
from src.deck_engine.errors import BadCombinationError, BadInitializationError


class TestCatalog:
    """Test the stateless catalog functions."""

    def test_validate_suit(self):
        """Test suits are accepted as members or display values."""
        for suit in Suit:
            assert validate_suit(suit)
            assert validate_suit(suit.value)
        assert not validate_suit("Stars")
        assert not validate_suit(None)

    def test_validate_rank(self):
        """Test ranks are accepted as members or display values."""
        for rank in Rank:
            assert validate_rank(rank)
        assert validate_rank("Ace")
        assert validate_rank("10")
        assert not validate_rank("1")
        assert not validate_rank("34234")
        assert not validate_rank(14)

    def test_validate_combination_accepts_pairs_and_cards(self):
        """Test tuples, Combinations and Cards all validate."""
        assert validate_combination(("Ace", "Hearts"))
        assert validate_combination(Combination(Rank.KING, Suit.CLUBS))
        assert validate_combination(Card(Rank.TWO, Suit.SPADES))

    @pytest.mark.parametrize("combo", [
        None,
        ("Ace", "Stars"),
        ("Eleven", "Hearts"),
        ("hello", "34234"),
        "AH",
        42,
        ("Ace", "Hearts", "extra"),
    ])
    def test_validate_combination_rejects_bad_input(self, combo):
        """Test missing, malformed or invalid combos raise BadCombinationError."""
        with pytest.raises(BadCombinationError):
            validate_combination(combo)

    def test_all_combinations_size(self):
        """Test there are exactly 52 distinct combinations."""
        combos = all_combinations()
        assert len(combos) == 52
        assert len(set(combos)) == 52

    def test_all_combinations_order(self):
        """Test rank-major, suit-minor order."""
        combos = all_combinations()
        assert combos[0] == Combination(Rank.ACE, Suit.HEARTS)
        assert combos[1] == Combination(Rank.ACE, Suit.DIAMONDS)
        assert combos[3] == Combination(Rank.ACE, Suit.CLUBS)
        assert combos[4] == Combination(Rank.TWO, Suit.HEARTS)
        assert combos[-1] == Combination(Rank.KING, Suit.CLUBS)
        assert [c.rank for c in combos[::4]] == list(Rank)


class TestCard:
    """Test Card class functionality."""

    def test_card_creation(self):
        """Test creating a card."""
        card = Card(Rank.FIVE, Suit.HEARTS)
        assert card.rank is Rank.FIVE
        assert card.suit is Suit.HEARTS

    def test_card_from_display_values(self):
        """Test display strings are normalized to enum members."""
        card = Card("Queen", "Spades")
        assert card.rank is Rank.QUEEN
        assert card.suit is Suit.SPADES

    def test_missing_fields_raise_bad_init(self):
        """Test a card needs both rank and suit."""
        with pytest.raises(BadInitializationError):
            Card()
        with pytest.raises(BadInitializationError):
            Card(suit=Suit.HEARTS)
        with pytest.raises(BadInitializationError):
            Card(rank=Rank.FIVE)

    def test_invalid_fields_raise_bad_combo(self):
        """Test an invalid rank or suit is a different failure from a missing one."""
        with pytest.raises(BadCombinationError):
            Card(Rank.TWO, "asdfs")
        with pytest.raises(BadCombinationError):
            Card("34234", Suit.HEARTS)
        with pytest.raises(BadCombinationError):
            Card("34234", "hello")

    def test_every_combination_builds(self):
        """Test all valid rank/suit combinations."""
        for combo in Card.COMBINATIONS:
            card = Card.from_combination(combo)
            assert card.rank is combo.rank
            assert card.suit is combo.suit
            assert card.combination == combo

    def test_card_equality(self):
        """Test two cards with same rank/suit are equal and hash the same."""
        card1 = Card(Rank.FIVE, Suit.HEARTS)
        card2 = Card("5", "Hearts")
        assert card1 == card2
        assert hash(card1) == hash(card2)
        assert len({card1, card2}) == 1

    def test_card_inequality(self):
        """Test different cards are not equal."""
        card = Card(Rank.FIVE, Suit.HEARTS)
        assert card != Card(Rank.FIVE, Suit.DIAMONDS)
        assert card != Card(Rank.SIX, Suit.HEARTS)
        assert card != (Rank.FIVE, Suit.HEARTS)

    def test_card_is_immutable(self):
        """Test rank and suit cannot be reassigned."""
        card = Card(Rank.ACE, Suit.SPADES)
        with pytest.raises(AttributeError):
            card.rank = Rank.KING
        with pytest.raises(AttributeError):
            card.colour = "black"

    def test_card_str_representation(self):
        """Test card string representation."""
        assert str(Card(Rank.ACE, Suit.HEARTS)) == "Ace of Hearts"
        assert str(Card(Rank.TEN, Suit.CLUBS)) == "10 of Clubs"
        assert repr(Card(Rank.ACE, Suit.HEARTS)) == "A♥"
        assert repr(Card(Rank.TEN, Suit.SPADES)) == "T♠"

    def test_error_kinds_exposed(self):
        """Test callers can inspect the error kinds from the class."""
        assert Card.BAD_INIT is BadInitializationError
        assert Card.BAD_COMBO is BadCombinationError
        assert Card.BAD_INIT.kind == "BAD_INIT"
        assert Card.BAD_COMBO.kind == "BAD_COMBO"
        assert len(Card.SUITS) == 4
        assert len(Card.RANKS) == 13
