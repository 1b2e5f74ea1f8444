"""
Deck class for managing one physical deck or an N-deck shoe.

The deck keeps every card it was built with, split into two piles:
- active: cards still available to draw, index 0 is the bottom, -1 the top
- inactive: cards already drawn, oldest pull first

Every draw moves cards from active to the end of inactive; replace_top()
moves them all back. Nothing in the public API creates or destroys cards, so
len(active) + len(inactive) == num_decks * 52 always holds unless someone
edits the piles returned by remaining()/pulled() directly. replace_top()
checks that total before moving anything.
"""

import random
from enum import Enum
from typing import List, Optional

from config import CARDS_PER_DECK, DEFAULT_NUM_DECKS, DEFAULT_PLAYERS, DEFAULT_PULL_AMOUNT
from .card import Card, all_combinations, normalize_combination
from .errors import BadAmountError, OutOfCardsError, TamperedWithError
from .logging_utils import get_logger

logger = get_logger(__name__)


class Extraction(Enum):
    """Which card a pull removes next."""
    TOP = "top"
    BOTTOM = "bottom"
    RANDOM = "random"

    def next_index(self, cards, rng: random.Random) -> int:
        """Index into cards of the card to remove. cards must not be empty."""
        if self is Extraction.TOP:
            return len(cards) - 1
        if self is Extraction.BOTTOM:
            return 0
        return rng.randrange(len(cards))


class Deck:
    """
    A shoe of num_decks standard 52-card decks.

    A fresh deck holds num_decks copies of every combination, laid out in
    catalog order with the copies of one combination next to each other.
    It is not shuffled unless asked for (shuffled=True or shuffle()).

    Not thread-safe: callers sharing a deck must serialize access themselves.
    """

    CARDS_PER_DECK = CARDS_PER_DECK

    BAD_AMOUNT = BadAmountError
    OUT_OF_CARDS = OutOfCardsError
    TAMPERED_WITH = TamperedWithError

    def __init__(self, num_decks: Optional[int] = None, shuffled: bool = False,
                 seed: Optional[int] = None):
        """
        Create a fully populated deck.

        Args:
            num_decks: Number of physical decks; None or 0 means DEFAULT_NUM_DECKS.
            shuffled: Shuffle the active pile once it is built.
            seed: Seed for this deck's private random generator, for
                reproducible shuffles and random pulls.

        Raises:
            BadAmountError: num_decks is negative.
        """
        if num_decks is not None and num_decks < 0:
            raise BadAmountError(f"Number of decks must be at least 1, got {num_decks}")
        self._num_decks = num_decks or DEFAULT_NUM_DECKS
        self._random = random.Random(seed)
        # These two lists are never rebound: remaining()/pulled() hand out
        # the live objects.
        self._active: List[Card] = []
        self._inactive: List[Card] = []
        self._create_deck()
        logger.debug("Created deck: %d deck(s), %d cards", self._num_decks, len(self._active))
        if shuffled:
            self.shuffle()

    def _create_deck(self):
        for combo in all_combinations():
            for _ in range(self._num_decks):
                self._active.append(Card.from_combination(combo))

    # ----------------- Piles -----------------
    def remaining(self) -> List[Card]:
        """
        The active pile itself (not a copy).

        Editing this list bypasses the deck's bookkeeping; replace_top()
        will notice if the card total changed.
        """
        return self._active

    def pulled(self) -> List[Card]:
        """The inactive pile itself (not a copy), oldest pull first."""
        return self._inactive

    # ----------------- Sizes -----------------
    def remaining_count(self) -> int:
        return len(self._active)

    def pulled_count(self) -> int:
        return len(self._inactive)

    def total_count(self) -> int:
        return len(self._active) + len(self._inactive)

    def deck_count(self) -> int:
        return self._num_decks

    def is_empty(self) -> bool:
        """Return True if no cards are left to draw."""
        return not self._active

    def __len__(self) -> int:
        return len(self._active)

    def __repr__(self) -> str:
        return (f"Deck(num_decks={self._num_decks}, remaining={len(self._active)}, "
                f"pulled={len(self._inactive)})")

    # ----------------- Membership -----------------
    def count_in_active(self, combo) -> int:
        """
        Number of cards matching combo still available to draw.

        Raises:
            BadCombinationError: combo is not a legal rank/suit pair.
        """
        return self._count(self._active, combo)

    def count_in_pulled(self, combo) -> int:
        """Number of cards matching combo already drawn. Validates like count_in_active."""
        return self._count(self._inactive, combo)

    @staticmethod
    def _count(cards, combo) -> int:
        target = normalize_combination(combo)
        return sum(1 for card in cards if card.combination == target)

    # ----------------- Peek -----------------
    def peek_top(self) -> Card:
        """Return the top card without removing it. Raises OutOfCardsError if empty."""
        if not self._active:
            raise OutOfCardsError()
        return self._active[-1]

    def peek_bottom(self) -> Card:
        """Return the bottom card without removing it. Raises OutOfCardsError if empty."""
        if not self._active:
            raise OutOfCardsError()
        return self._active[0]

    # ----------------- Pull -----------------
    def pull_top(self, n: Optional[int] = None):
        """Remove and return the top card, or the top n cards as a list (topmost first)."""
        return self._pull(Extraction.TOP, n)

    def pull_bottom(self, n: Optional[int] = None):
        """Remove and return the bottom card, or the bottom n cards as a list."""
        return self._pull(Extraction.BOTTOM, n)

    def pull_random(self, n: Optional[int] = None):
        """Remove and return one uniformly random card, or n of them as a list."""
        return self._pull(Extraction.RANDOM, n)

    def _pull(self, policy: Extraction, n: Optional[int]):
        """
        Move n cards from the active pile to the end of the inactive pile.

        Args:
            policy: Which card to remove at each step. RANDOM draws a fresh
                index over the shrinking pile every step.
            n: How many cards; None means DEFAULT_PULL_AMOUNT.

        Returns:
            Card when one card was asked for (n omitted or 1), otherwise a
            list of the removed cards in removal order.

        Raises:
            BadAmountError: n < 1
            OutOfCardsError: n > remaining_count(); nothing is moved.
        """
        amount = DEFAULT_PULL_AMOUNT if n is None else n
        if amount < 1:
            raise BadAmountError(f"Invalid amount of cards requested: {amount}. Must be at least 1.")
        if amount > len(self._active):
            raise OutOfCardsError(
                f"Requested {amount} card(s) but only {len(self._active)} remain. "
                "Replace cards to continue."
            )

        cards = []
        for _ in range(amount):
            card = self._active.pop(policy.next_index(self._active, self._random))
            self._inactive.append(card)
            cards.append(card)
        logger.debug("Pulled %d card(s) from %s, %d remaining", amount, policy.value, len(self._active))

        if amount == 1:
            return cards[0]
        return cards

    # ----------------- Shuffle / replace -----------------
    def shuffle(self, seed: Optional[int] = None):
        """
        Randomize the order of the active pile in place (Fisher-Yates via
        random.shuffle). The inactive pile is left alone.

        Args:
            seed: If given, reseed this deck's generator first.
        """
        if seed is not None:
            self._random = random.Random(seed)
        self._random.shuffle(self._active)
        logger.debug("Shuffled %d active card(s)", len(self._active))

    def replace_top(self, cards=None):
        """
        Put every pulled card back on top of the active pile.

        The pulled cards keep their pull order, so the oldest pull lands
        lowest and the most recent pull ends up as the new top card.

        Args:
            cards: Not supported; only the no-argument form is defined.

        Raises:
            TamperedWithError: The two piles no longer add up to
                num_decks * CARDS_PER_DECK. Nothing is moved.
            NotImplementedError: cards was given.
        """
        if cards is not None:
            raise NotImplementedError("replace_top() only supports replacing every pulled card")

        expected = self._num_decks * CARDS_PER_DECK
        actual = self.pulled_count() + self.remaining_count()
        if actual != expected:
            logger.warning("Deck total is %d, expected %d; refusing to replace", actual, expected)
            raise TamperedWithError(f"Deck holds {actual} card(s), expected {expected}.")

        replaced = len(self._inactive)
        self._active.extend(self._inactive)
        self._inactive.clear()
        logger.debug("Replaced %d card(s) on top, %d remaining", replaced, len(self._active))

    # ----------------- Deal -----------------
    def deal(self, players: int = DEFAULT_PLAYERS, cards_per_player: Optional[int] = None) -> List[List[Card]]:
        """
        Deal cards round by round from the top, like a dealer at a table.

        Each round gives one card to every player in turn before the next
        round starts, so hands[0][0] is drawn before hands[1][0], which is
        drawn before hands[0][1].

        Args:
            players: Number of hands.
            cards_per_player: Cards in each hand; defaults to
                total_count() // players (leftover cards stay in the deck).

        Returns:
            list of hands, each a list of cards in the order received.

        Raises:
            BadAmountError: players < 1 or cards_per_player < 0.
            OutOfCardsError: Not enough cards remain for the whole deal;
                nothing is dealt.
        """
        if players < 1:
            raise BadAmountError(f"Need at least 1 player to deal to, got {players}")
        if cards_per_player is None:
            cards_per_player = self.total_count() // players
        if cards_per_player < 0:
            raise BadAmountError(f"Cards per player cannot be negative, got {cards_per_player}")

        needed = players * cards_per_player
        if needed > len(self._active):
            raise OutOfCardsError(
                f"Dealing {cards_per_player} card(s) to {players} player(s) needs {needed}, "
                f"only {len(self._active)} remain."
            )

        hands = [[] for _ in range(players)]
        for _ in range(cards_per_player):
            for hand in hands:
                hand.append(self.pull_top())
        logger.debug("Dealt %d card(s) to each of %d player(s)", cards_per_player, players)
        return hands
