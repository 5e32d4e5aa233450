"""Memory match engine with a turn state machine."""

import logging
from random import Random
from typing import Callable, Hashable, Iterable

from transitions import Machine

from config import config
from core.cards import Card, build_deck, unique_symbols
from core.game.events import EventEmitter, EventType, GameEvent
from core.game.scheduler import Scheduler
from core.game.state import CardSnapshot, GameSnapshot, GameState, TurnState

logger = logging.getLogger(__name__)


class MatchGame:
    """
    Memory match game engine using a state machine.

    This is the core game logic, completely UI-agnostic.
    Communication happens through events, read accessors and return values.

    The mismatch flip-back is a deferred action on ``scheduler``; it only runs
    when the owner calls ``advance``.
    """

    # State machine states
    STATES = [s.name.lower() for s in TurnState]

    # State machine transitions
    TRANSITIONS = [
        {"trigger": "select_first", "source": "idle", "dest": "awaiting_second"},
        {"trigger": "resolve_pair", "source": "awaiting_second", "dest": "idle"},
        {"trigger": "finish", "source": ["idle", "awaiting_second"], "dest": "over"},
        {"trigger": "restart", "source": "*", "dest": "idle"},
    ]

    def __init__(
        self,
        symbols: Iterable[Hashable] | None = None,
        mismatch_delay: float | None = None,
        match_points: int | None = None,
        mismatch_penalty: int | None = None,
        rng: Random | None = None,
        scheduler: Scheduler | None = None,
    ) -> None:
        """
        Initialize a new game and deal the first deck.

        Args:
            symbols: Alphabet to build pairs from (uses config default if not provided)
            mismatch_delay: Seconds before a mismatched pair flips back
            match_points: Points awarded per matched pair
            mismatch_penalty: Points deducted per mismatch (score never drops below 0)
            rng: Random number generator for reproducible games
            scheduler: Scheduler for deferred actions (a private one if not provided)
        """
        defaults = config.match
        self.symbols: tuple[Hashable, ...] = tuple(
            unique_symbols(defaults.symbols if symbols is None else symbols)
        )
        self.mismatch_delay = (
            defaults.mismatch_delay if mismatch_delay is None else mismatch_delay
        )
        self.match_points = defaults.match_points if match_points is None else match_points
        self.mismatch_penalty = (
            defaults.mismatch_penalty if mismatch_penalty is None else mismatch_penalty
        )

        if self.mismatch_delay < 0:
            raise ValueError("Mismatch delay must not be negative")
        if self.match_points < 0 or self.mismatch_penalty < 0:
            raise ValueError("Points and penalty must not be negative")

        self._rng = rng or Random(defaults.seed)
        self.scheduler = scheduler or Scheduler()
        self.events = EventEmitter()
        self._state = GameState()

        # Initialize state machine
        self.machine = Machine(
            model=self,
            states=self.STATES,
            transitions=self.TRANSITIONS,
            initial="idle",
            auto_transitions=False,
            model_attribute="_machine_state",
        )

        self.new_game()

    @property
    def turn_state(self) -> TurnState:
        """Get current turn state as enum."""
        return TurnState[self._machine_state.upper()]  # type: ignore

    def subscribe(
        self,
        handler: Callable[[GameEvent], None],
        event_type: EventType | None = None,
    ) -> None:
        """Subscribe to game events."""
        self.events.subscribe(handler, event_type)

    def unsubscribe(
        self,
        handler: Callable[[GameEvent], None],
        event_type: EventType | None = None,
    ) -> bool:
        """Unsubscribe from game events."""
        return self.events.unsubscribe(handler, event_type)

    # Commands

    def new_game(self, symbols: Iterable[Hashable] | None = None) -> None:
        """
        Discard the current game and deal a fresh shuffled deck.

        Args:
            symbols: New alphabet; the previous one is reused if not provided
        """
        if symbols is not None:
            self.symbols = tuple(unique_symbols(symbols))

        self.scheduler.cancel_all()

        self._state = GameState(
            cards=build_deck(self.symbols, self._rng),
            generation=self._state.generation + 1,
        )
        self.restart()

        logger.info(
            "New game %d with %d pairs",
            self._state.generation,
            self._state.total_pairs,
        )
        self.events.emit_new(
            EventType.GAME_STARTED,
            generation=self._state.generation,
            pairs=self._state.total_pairs,
        )

        # An empty alphabet is complete before the first tap
        if not self._state.cards:
            self._end_game()

    def shuffle(self) -> None:
        """Re-order the current cards without touching any other state."""
        self._rng.shuffle(self._state.cards)
        self.events.emit_new(EventType.DECK_SHUFFLED, cards=len(self._state.cards))

    def select_card(self, card_id: str) -> bool:
        """
        Handle a tap on a card.

        The first tap of a turn turns the card face-up and remembers it. The
        second tap counts a move and compares symbols: a match scores and
        locks both cards, a mismatch costs a point and schedules both cards
        to flip back after ``mismatch_delay``.

        Tapping the card that is already waiting for its partner is ignored,
        so a card can never be matched with itself.

        Args:
            card_id: Identifier of the tapped card

        Returns:
            True if the tap changed the game state
        """
        state = self._state
        card = state.find(card_id)

        if card is None:
            return self._ignore(card_id, "unknown_card")
        if card.matched:
            return self._ignore(card_id, "already_matched")
        if card.id == state.pending_selection:
            return self._ignore(card_id, "already_selected")

        card.face_up = True
        self.events.emit_new(EventType.CARD_FLIPPED, card_id=card.id, symbol=card.symbol)

        first = state.find(state.pending_selection) if state.pending_selection else None
        if first is None:
            state.pending_selection = card.id
            self.select_first()
            logger.debug("First pick %r", card)
            return True

        state.pending_selection = None
        state.moves += 1

        if first.symbol == card.symbol:
            self._resolve_match(first, card)
        else:
            self._resolve_mismatch(first, card)
        return True

    def advance(self, dt: float) -> int:
        """
        Advance the scheduler clock, running any due flip-backs.

        Args:
            dt: Elapsed time in seconds

        Returns:
            Number of deferred actions run
        """
        return self.scheduler.advance(dt)

    # Turn resolution

    def _resolve_match(self, first: Card, second: Card) -> None:
        state = self._state
        first.matched = True
        second.matched = True
        state.score += self.match_points

        logger.debug("Matched %r and %r", first, second)
        self.events.emit_new(
            EventType.PAIR_MATCHED,
            card_ids=(first.id, second.id),
            symbol=first.symbol,
            score=state.score,
            moves=state.moves,
        )

        if state.all_matched:
            self._end_game()
        else:
            self.resolve_pair()

    def _resolve_mismatch(self, first: Card, second: Card) -> None:
        state = self._state
        state.score = max(0, state.score - self.mismatch_penalty)
        self.resolve_pair()

        logger.debug("Mismatch %r and %r", first, second)
        self.events.emit_new(
            EventType.PAIR_MISMATCHED,
            card_ids=(first.id, second.id),
            score=state.score,
            moves=state.moves,
        )

        state.flip_back_owner[first.id] = state.moves
        state.flip_back_owner[second.id] = state.moves
        self.scheduler.call_later(
            self.mismatch_delay,
            self._flip_back,
            state.generation,
            state.moves,
            first.id,
            second.id,
        )

    def _flip_back(self, generation: int, move: int, *card_ids: str) -> None:
        """Turn a mismatched pair face-down, skipping anything that has moved on."""
        state = self._state
        if generation != state.generation:
            logger.debug("Dropping flip-back from game %d", generation)
            return

        hidden = []
        for card_id in card_ids:
            card = state.find(card_id)
            if card is None or card.matched or not card.face_up:
                continue
            # Re-picked as the first card of a newer turn
            if card.id == state.pending_selection:
                continue
            # A later mismatch owns this card now
            if state.flip_back_owner.get(card.id) != move:
                continue
            del state.flip_back_owner[card.id]
            card.face_up = False
            hidden.append(card.id)

        if hidden:
            self.events.emit_new(EventType.CARDS_HIDDEN, card_ids=tuple(hidden))

    def _end_game(self) -> None:
        state = self._state
        state.is_over = True
        self.finish()
        logger.info("Game %d over: score %d in %d moves", state.generation, state.score, state.moves)
        self.events.emit_new(EventType.GAME_OVER, score=state.score, moves=state.moves)

    def _ignore(self, card_id: str, reason: str) -> bool:
        logger.debug("Ignoring tap on %s: %s", card_id, reason)
        self.events.emit_new(EventType.SELECTION_IGNORED, card_id=card_id, reason=reason)
        return False

    # Read accessors

    @property
    def cards(self) -> tuple[CardSnapshot, ...]:
        """Return the cards in display order."""
        return tuple(CardSnapshot.from_card(card) for card in self._state.cards)

    @property
    def score(self) -> int:
        return self._state.score

    @property
    def moves(self) -> int:
        return self._state.moves

    @property
    def is_over(self) -> bool:
        return self._state.is_over

    @property
    def pending_selection(self) -> str | None:
        """Return the id of the card waiting for its partner, if any."""
        return self._state.pending_selection

    @property
    def generation(self) -> int:
        return self._state.generation

    @property
    def pairs_matched(self) -> int:
        return self._state.pairs_matched

    @property
    def total_pairs(self) -> int:
        return self._state.total_pairs

    def get_card(self, card_id: str) -> CardSnapshot | None:
        """Look up a single card by id."""
        card = self._state.find(card_id)
        return CardSnapshot.from_card(card) if card is not None else None

    def snapshot(self) -> GameSnapshot:
        """Get a snapshot of the current game state."""
        state = self._state
        return GameSnapshot(
            turn_state=self.turn_state,
            cards=self.cards,
            score=state.score,
            moves=state.moves,
            pending_selection=state.pending_selection,
            is_over=state.is_over,
            pairs_matched=state.pairs_matched,
            total_pairs=state.total_pairs,
        )
