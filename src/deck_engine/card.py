"""
Card value type and the card catalog.

Why a class instead of just tuples?
- Type clarity: Card(Rank.ACE, Suit.HEARTS) vs ('Ace', 'Hearts')
- Validation happens once, at construction, so a Card in a deck is always legal
- Self-documenting: str(card) reads "Ace of Hearts"

The catalog half of this module (Suit, Rank, the validators and
all_combinations) is stateless: it only answers "is this legal?" and
"what does one full deck contain?".
"""

from enum import Enum
from typing import List, NamedTuple

from .errors import BadCombinationError, BadInitializationError


class Suit(Enum):
    """The four suits, in declaration order."""
    HEARTS = "Hearts"
    DIAMONDS = "Diamonds"
    SPADES = "Spades"
    CLUBS = "Clubs"

    def __str__(self) -> str:
        return self.value

    @property
    def symbol(self) -> str:
        return _SUIT_SYMBOLS[self]


class Rank(Enum):
    """The thirteen ranks, Ace low, in declaration order."""
    ACE = "Ace"
    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    TEN = "10"
    JACK = "Jack"
    QUEEN = "Queen"
    KING = "King"

    def __str__(self) -> str:
        return self.value

    @property
    def short(self) -> str:
        """One-character label: A, 2-9, T, J, Q, K."""
        return "T" if self is Rank.TEN else self.value[0]


_SUIT_SYMBOLS = {
    Suit.HEARTS: "♥",
    Suit.DIAMONDS: "♦",
    Suit.SPADES: "♠",
    Suit.CLUBS: "♣",
}


class Combination(NamedTuple):
    """One (rank, suit) pair: the unit of card identity."""
    rank: Rank
    suit: Suit


def _coerce(enum_cls, value):
    """Return the enum member for value (a member or its display value), else None."""
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        return None


def validate_suit(suit) -> bool:
    """Return True if suit is a Suit member or one of their display values."""
    return _coerce(Suit, suit) is not None


def validate_rank(rank) -> bool:
    """Return True if rank is a Rank member or one of their display values."""
    return _coerce(Rank, rank) is not None


def _split(combo):
    """
    Pull (rank, suit) out of a combination-like value.

    Accepts anything with rank and suit attributes (Card, Combination) or a
    plain 2-tuple. Raises BadCombinationError for anything else.
    """
    if combo is None:
        raise BadCombinationError("No combination given.")
    if hasattr(combo, "rank") and hasattr(combo, "suit"):
        return combo.rank, combo.suit
    try:
        rank, suit = combo
    except (TypeError, ValueError):
        raise BadCombinationError(f"Not a (rank, suit) pair: {combo!r}")
    return rank, suit


def validate_combination(combo) -> bool:
    """
    Validate a rank/suit pair.

    Returns:
        bool: Always True; invalid input raises instead.

    Raises:
        BadCombinationError: combo is missing, malformed, or either field is
            not a legal value.
    """
    rank, suit = _split(combo)
    if not (validate_rank(rank) and validate_suit(suit)):
        raise BadCombinationError(f"Invalid combination: rank={rank!r}, suit={suit!r}")
    return True


def normalize_combination(combo) -> Combination:
    """Validate combo and return it as a Combination of enum members."""
    validate_combination(combo)
    rank, suit = _split(combo)
    return Combination(_coerce(Rank, rank), _coerce(Suit, suit))


def all_combinations() -> List[Combination]:
    """
    Every legal (rank, suit) pair: 52 of them.

    Order is rank-major, suit-minor (Ace of Hearts, Ace of Diamonds, Ace of
    Spades, Ace of Clubs, 2 of Hearts, ...). Deck relies on this order for
    the layout of a freshly created deck, so do not change it.
    """
    return [Combination(rank, suit) for rank in Rank for suit in Suit]


class Card:
    """
    Represents a single playing card.

    Cards are immutable once created: rank and suit never change.
    Two cards with the same rank and suit are equal and hash the same, so a
    multi-deck shoe can hold several interchangeable copies of one card.
    """

    __slots__ = ("_rank", "_suit")

    BAD_INIT = BadInitializationError
    BAD_COMBO = BadCombinationError
    SUITS = tuple(Suit)
    RANKS = tuple(Rank)
    COMBINATIONS = tuple(all_combinations())

    def __init__(self, rank=None, suit=None):
        """
        Initialize a card.

        Args:
            rank (Rank | str): Rank member or its display value ("Ace", "10", ...)
            suit (Suit | str): Suit member or its display value ("Hearts", ...)

        Raises:
            BadInitializationError: rank or suit is missing.
            BadCombinationError: rank or suit is not a legal value.
        """
        if rank is None or suit is None:
            raise BadInitializationError()
        combo = normalize_combination((rank, suit))
        self._rank = combo.rank
        self._suit = combo.suit

    @classmethod
    def from_combination(cls, combo) -> "Card":
        rank, suit = _split(combo)
        return cls(rank, suit)

    @property
    def rank(self) -> Rank:
        return self._rank

    @property
    def suit(self) -> Suit:
        return self._suit

    @property
    def combination(self) -> Combination:
        return Combination(self._rank, self._suit)

    def __eq__(self, other):
        if not isinstance(other, Card):
            return NotImplemented
        return self._rank is other._rank and self._suit is other._suit

    def __hash__(self):
        return hash((self._rank, self._suit))

    def __str__(self):
        """Return readable representation (e.g., 'Ace of Hearts')."""
        return f"{self._rank.value} of {self._suit.value}"

    def __repr__(self):
        """Return compact representation with symbols (e.g., 'A♥', 'T♠')."""
        return f"{self._rank.short}{self._suit.symbol}"
