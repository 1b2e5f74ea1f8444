"""
Error kinds raised by the deck engine.

Every error is raised at the point of detection and never caught inside the
engine. Callers branch either on the class (``except OutOfCardsError``) or on
the ``kind`` identifier carried by every instance.
"""


class DeckEngineError(Exception):
    """Base class for every deck engine failure."""

    kind = "DECK_ENGINE_ERROR"
    default_message = "Deck engine error."

    def __init__(self, message=None):
        super().__init__(message or self.default_message)


class BadInitializationError(DeckEngineError):
    """A Card was built without both a rank and a suit."""

    kind = "BAD_INIT"
    default_message = "Card requires both a rank and a suit during construction."


class BadCombinationError(DeckEngineError):
    """A rank/suit pair is not among the valid enumerations."""

    kind = "BAD_COMBO"
    default_message = "Invalid rank/suit combination."


class BadAmountError(DeckEngineError):
    kind = "BAD_AMOUNT"
    default_message = "Invalid amount of cards requested. Must be at least 1."


class OutOfCardsError(DeckEngineError):
    kind = "OUT_OF_CARDS"
    default_message = "No more cards are available to pull. Replace cards to continue."


class TamperedWithError(DeckEngineError):
    """The piles no longer add up to the deck's fixed total."""

    kind = "TAMPERED_WITH"
    default_message = "Deck has been tampered with: card total no longer matches the deck size."
