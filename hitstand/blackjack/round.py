"""
The state machine for one round of single-table Blackjack against a dealer.

A `BlackjackRound` owns the deck and both hands and performs every mutation.
The caller drives it with four entry points:

- ``start()`` deals a new round, discarding any previous one.
- ``draw()`` and ``stand()`` are the player's moves. They are ignored unless
  the player is still awaiting action.
- ``advance(tick_counter)`` is the heartbeat. On every tick whose counter is a
  multiple of the rules' reveal interval the dealer takes exactly one visible
  step: reveal the hole card, draw a card, or settle the round.

Between calls the caller reads ``snapshot()``. Each change is also emitted on
the event bus (see `hitstand.events.EngineEventType`).

>>> game = BlackjackRound()
>>> game.start()
>>> len(game.player_hand), len(game.dealer_hand)
(2, 2)
"""

import logging
import random
import uuid
from typing import Any, Dict, Optional, Union

from hitstand.blackjack.action import Action
from hitstand.blackjack.hand import BlackjackHand
from hitstand.blackjack.rules import Rules
from hitstand.blackjack.state import GameResult, PlayerStatus, RoundSnapshot
from hitstand.common.card import Card
from hitstand.common.deck import Deck
from hitstand.events import EngineEventType, EventBus, EventEmitter

logger = logging.getLogger(__name__)

PLAYER = "player"
DEALER = "dealer"


def determine_result(player_hand: BlackjackHand, dealer_hand: BlackjackHand) -> GameResult:
    """
    Settle a round in which neither hand is bust and the dealer has stopped drawing.

    A natural blackjack beats any other 21; two naturals push.
    """
    player_blackjack = player_hand.has_blackjack
    dealer_blackjack = dealer_hand.has_blackjack
    player_score = player_hand.score()
    dealer_score = dealer_hand.score()

    if player_blackjack and dealer_blackjack:
        return GameResult.PUSH
    if dealer_blackjack or player_score < dealer_score:
        return GameResult.PLAYER_LOST
    if player_blackjack or player_score > dealer_score:
        return GameResult.PLAYER_WON
    return GameResult.PUSH


def _card_payload(card: Card) -> Optional[str]:
    return None if card.concealed else str(card)


class BlackjackRound:
    """
    One table, one player, one dealer.

    Args:
        rules: A `Rules` instance, a dict of rule options, or None for defaults.
        rng: Random source used for every shuffle made by this round.
        event_bus: Emitter for round events; defaults to the global `EventBus`.
    """

    def __init__(
        self,
        rules: Union[Rules, Dict[str, Any], None] = None,
        rng: Optional[random.Random] = None,
        event_bus: Optional[EventEmitter] = None,
    ):
        self.rules = Rules.coerce(rules)
        self.rng = rng
        self.event_bus = event_bus or EventBus.get_instance()

        self.round_id: Optional[str] = None
        self.deck = Deck([])
        self.player_hand = BlackjackHand()
        self.dealer_hand = BlackjackHand()
        self.player_status = PlayerStatus.AWAITING_ACTION
        self.result: Optional[GameResult] = None
        self.running = False

    def start(self, deck: Optional[Deck] = None) -> None:
        """
        Begin a new round.

        Args:
            deck: Deck to deal from. A freshly shuffled deck is used when omitted;
                passing one lets a caller stack the cards.
        """
        self.round_id = str(uuid.uuid4())
        self.deck = deck if deck is not None else Deck.shuffled(self.rng)
        self.result = None
        self.running = True
        self.player_status = PlayerStatus.AWAITING_ACTION

        self.player_hand = BlackjackHand([self.deck.draw(), self.deck.draw()])
        self.dealer_hand = BlackjackHand([self.deck.draw(), self.deck.draw()])
        self.dealer_hand.conceal(0)

        logger.debug(
            "Round %s started: player %s, dealer %s",
            self.round_id,
            self.player_hand,
            self.dealer_hand,
        )
        self._emit(
            EngineEventType.ROUND_STARTED,
            {"deck_remaining": self.deck.size, "rules": self.rules.to_dict()},
        )
        for recipient, hand in ((PLAYER, self.player_hand), (DEALER, self.dealer_hand)):
            for card in hand:
                self._emit_card_dealt(recipient, card)

        if self.player_hand.has_blackjack:
            self._complete_player_turn(PlayerStatus.BLACKJACK)

    def draw(self) -> None:
        """The player hits. Ignored unless the player is awaiting action."""
        if not self._awaiting_player():
            logger.debug("Ignoring draw while player is %s", self.player_status.name)
            return

        card = self.deck.draw()
        self.player_hand.add_card(card)
        self._emit(EngineEventType.PLAYER_ACTION, {"action": Action.DRAW.value})
        self._emit_card_dealt(PLAYER, card)
        logger.debug("Player draws %s (score %d)", card, self.player_hand.score())

        if self.player_hand.is_bust:
            self._emit(
                EngineEventType.HAND_BUSTED,
                {"owner": PLAYER, "score": self.player_hand.score()},
            )
            self._complete_player_turn(PlayerStatus.BUST)

    def stand(self) -> None:
        """The player stands. Ignored unless the player is awaiting action."""
        if not self._awaiting_player():
            logger.debug("Ignoring stand while player is %s", self.player_status.name)
            return

        self._emit(EngineEventType.PLAYER_ACTION, {"action": Action.STAND.value})
        self._complete_player_turn(PlayerStatus.STANDING)

    def advance(self, tick_counter: int) -> None:
        """
        Heartbeat from the caller's frame loop.

        Only qualifying ticks act, and each one performs at most one step. Ticks
        before ``start`` or after the result is known do nothing.
        """
        if not self.running or self.result is not None:
            return
        if not self.rules.is_qualifying_tick(tick_counter):
            return

        if self.player_hand.is_bust:
            self._finish(GameResult.PLAYER_LOST)
        elif self.dealer_hand.is_bust:
            self._finish(GameResult.PLAYER_WON)
        elif self.player_status != PlayerStatus.AWAITING_ACTION:
            self._dealer_step()

    def handle_action(self, action: Union[Action, str]) -> None:
        """
        Dispatch a semantic input event.

        Raises:
            ValueError: If ``action`` is not a known action name.
        """
        action = Action(action)
        if action is Action.START:
            self.start()
        elif action is Action.DRAW:
            self.draw()
        elif action is Action.STAND:
            self.stand()

    def snapshot(self) -> RoundSnapshot:
        """Return a read-only copy of the round for rendering."""
        return RoundSnapshot(
            deck_remaining=self.deck.size,
            player_cards=tuple(_copy_card(card) for card in self.player_hand),
            dealer_cards=tuple(_copy_card(card) for card in self.dealer_hand),
            player_status=self.player_status,
            result=self.result,
            running=self.running,
            player_score=self.player_hand.score(),
            dealer_visible_score=self.dealer_hand.visible_score(),
        )

    def _awaiting_player(self) -> bool:
        return self.running and self.player_status == PlayerStatus.AWAITING_ACTION

    def _complete_player_turn(self, status: PlayerStatus) -> None:
        self.player_status = status
        logger.debug("Player turn over: %s", status.name)
        self._emit(
            EngineEventType.HAND_COMPLETED,
            {
                "owner": PLAYER,
                "status": status.name,
                "score": self.player_hand.score(),
            },
        )

    def _dealer_step(self) -> None:
        if self.dealer_hand.has_concealed_card:
            for card in self.dealer_hand.reveal():
                logger.debug("Dealer reveals %s", card)
                self._emit(
                    EngineEventType.CARD_REVEALED,
                    {"owner": DEALER, "card": str(card)},
                )
        elif self.rules.should_dealer_hit(self.dealer_hand):
            card = self.deck.draw()
            self.dealer_hand.add_card(card)
            logger.debug("Dealer draws %s (score %d)", card, self.dealer_hand.score())
            self._emit(
                EngineEventType.DEALER_ACTION,
                {"action": Action.DRAW.value, "score": self.dealer_hand.score()},
            )
            self._emit_card_dealt(DEALER, card)
            if self.dealer_hand.is_bust:
                self._emit(
                    EngineEventType.HAND_BUSTED,
                    {"owner": DEALER, "score": self.dealer_hand.score()},
                )
        else:
            self._emit(
                EngineEventType.DEALER_ACTION,
                {"action": Action.STAND.value, "score": self.dealer_hand.score()},
            )
            self._finish(determine_result(self.player_hand, self.dealer_hand))

    def _finish(self, result: GameResult) -> None:
        self.result = result
        logger.info(
            "Round %s ended: %s (player %d, dealer %d)",
            self.round_id,
            result.name,
            self.player_hand.score(),
            self.dealer_hand.score(),
        )
        self._emit(
            EngineEventType.ROUND_ENDED,
            {
                "result": result.name,
                "player_score": self.player_hand.score(),
                "dealer_score": self.dealer_hand.visible_score(),
            },
        )

    def _emit_card_dealt(self, recipient: str, card: Card) -> None:
        self._emit(
            EngineEventType.CARD_DEALT,
            {
                "recipient": recipient,
                "card": _card_payload(card),
                "concealed": card.concealed,
                "deck_remaining": self.deck.size,
            },
        )

    def _emit(self, event_type: EngineEventType, data: Dict[str, Any]) -> None:
        self.event_bus.emit(event_type, {"round_id": self.round_id, **data})


def _copy_card(card: Card) -> Card:
    return Card(card.suit, card.rank, concealed=card.concealed)
