from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Iterable, Literal

from .actions import COMPUTER, HUMAN, Action, DrawAction, PlaceCardAction, PlayCardAction
from .ai import play_automated_move
from .matching import apply_special, attempt_match, force_draw
from .piles import build_deck, draw, shuffle
from .state import CENTER_ROW_SIZE, HAND_SIZE, Event, GameConfig, GameState, Phase, PlayerState
from .types import Card, total_value

logger = logging.getLogger(__name__)

ErrorCode = Literal[
    "illegal_move",
    "already_drawn",
    "must_place_first",
    "must_draw_first",
    "not_your_turn",
    "invalid_hand_index",
    "game_over",
    "unknown_action",
]
Outcome = Literal["matched", "special", "drawn", "placed", "passed"]


@dataclass
class StepResult:
    ok: bool
    events: list[Event]
    error: str | None = None
    code: ErrorCode | None = None
    outcome: Outcome | None = None
    card: Card | None = None
    captured: int = 0


@dataclass(frozen=True)
class FinalScores:
    human: int
    computer: int
    human_raw: int
    computer_raw: int
    finisher: int
    winner: int | None  # None on a tie


@dataclass(frozen=True)
class GameView:
    """Read-only picture of the game for rendering."""

    hand: tuple[Card, ...]
    center_row: tuple[Card, ...]
    stock_count: int
    discard_count: int
    opponent_hand_count: int
    score_pile_counts: tuple[int, int]
    current_player: int
    phase: Phase
    has_drawn: bool


def _reject(code: ErrorCode, msg: str) -> StepResult:
    return StepResult(ok=False, events=[], error=msg, code=code)


def _seed_center_row(state: GameState) -> None:
    while len(state.center_row) < CENTER_ROW_SIZE:
        card = draw(state.stock)
        if card is None:
            break
        if card.is_special:
            # Specials never start face-up; tuck them under the stock.
            state.stock.insert(0, card)
            continue
        state.center_row.append(card)


def new_game(seed: int | None = None, config: GameConfig | None = None) -> GameState:
    cfg = config or GameConfig()
    if seed is None:
        seed = random.randrange(2**31)
    rng = random.Random(seed)

    deck = build_deck()
    shuffle(rng, deck)

    state = GameState(
        config=cfg,
        seed=seed,
        rng=rng,
        players=[
            PlayerState(name=cfg.human_name, is_computer=False),
            PlayerState(name=cfg.computer_name, is_computer=True),
        ],
        stock=deck,
    )
    for _ in range(HAND_SIZE):
        for ps in state.players:
            card = draw(state.stock)
            assert card is not None
            ps.hand.append(card)
    _seed_center_row(state)

    state.emit("GAME_STARTED", seed=seed, center_row=[str(c) for c in state.center_row])
    state.emit("TURN_STARTED", player=HUMAN)
    logger.info("New game started (seed=%d)", seed)
    return state


def raw_score(ps: PlayerState, is_final_scorer: bool) -> int:
    score = total_value(ps.score_pile)
    if not is_final_scorer:
        score -= total_value(ps.hand)
    return score


def score_player(ps: PlayerState, is_final_scorer: bool) -> int:
    return max(raw_score(ps, is_final_scorer), 0)


def _check_game_over(state: GameState) -> bool:
    if state.phase == "game_over":
        return True
    if state.human.hand and state.computer.hand:
        return False

    state.finisher = HUMAN if not state.human.hand else COMPUTER
    for i, ps in enumerate(state.players):
        ps.score = score_player(ps, is_final_scorer=(i == state.finisher))
    state.phase = "game_over"
    state.has_drawn = False

    scores = final_scores(state)
    state.emit(
        "GAME_OVER",
        finisher=scores.finisher,
        human=scores.human,
        computer=scores.computer,
        winner=scores.winner,
    )
    logger.info("Game over: %s %d, %s %d", state.human.name, scores.human, state.computer.name, scores.computer)
    return True


def _computer_turn(state: GameState) -> None:
    move = play_automated_move(state, COMPUTER)
    if move is not None:
        return
    # Nothing matched and the stock was empty: a plain draw triggers the reshuffle.
    if force_draw(state, COMPUTER) is None:
        state.emit("TURN_PASSED", player=COMPUTER)


def _end_turn(state: GameState) -> None:
    state.has_drawn = False
    while not _check_game_over(state):
        state.current_player = state.opponent(state.current_player)
        state.emit("TURN_STARTED", player=state.current_player)
        if state.current_player == HUMAN:
            state.phase = "idle"
            return
        _computer_turn(state)


def _hand_card(state: GameState, player: int, hand_index: int) -> Card | None:
    hand = state.players[player].hand
    if hand_index < 0 or hand_index >= len(hand):
        return None
    return hand[hand_index]


def _play_card(state: GameState, action: PlayCardAction) -> StepResult:
    if state.phase == "must_place":
        return _reject("must_place_first", "You must place a card in the center row first.")
    card = _hand_card(state, action.player, action.hand_index)
    if card is None:
        return _reject("invalid_hand_index", "Invalid hand index.")

    before = len(state.event_log)
    if card.is_special:
        apply_special(state, action.player, card)
        _end_turn(state)
        return StepResult(ok=True, events=state.event_log[before:], outcome="special", card=card)

    result = attempt_match(state, action.player, card)
    if not result.matched:
        return _reject("illegal_move", "Invalid move! That card matches nothing in the center row.")
    _end_turn(state)
    return StepResult(
        ok=True,
        events=state.event_log[before:],
        outcome="matched",
        card=card,
        captured=result.captured,
    )


def _draw(state: GameState, action: DrawAction) -> StepResult:
    if state.has_drawn:
        return _reject("already_drawn", "You can only draw one card per turn.")

    before = len(state.event_log)
    card = force_draw(state, action.player)
    if card is None:
        # Stock and discard are both empty: the turn passes without penalty.
        state.emit("TURN_PASSED", player=action.player)
        _end_turn(state)
        return StepResult(ok=True, events=state.event_log[before:], outcome="passed")

    state.has_drawn = True
    state.phase = "must_place"
    return StepResult(ok=True, events=state.event_log[before:], outcome="drawn", card=card)


def _place(state: GameState, action: PlaceCardAction) -> StepResult:
    if state.phase != "must_place":
        return _reject("must_draw_first", "You must draw a card before placing one in the center.")
    card = _hand_card(state, action.player, action.hand_index)
    if card is None:
        return _reject("invalid_hand_index", "Invalid hand index.")

    before = len(state.event_log)
    state.players[action.player].hand.remove(card)
    state.center_row.append(card)
    state.emit("CARD_PLACED", player=action.player, card=str(card))
    _end_turn(state)
    return StepResult(ok=True, events=state.event_log[before:], outcome="placed", card=card)


def step(state: GameState, action: Action) -> StepResult:
    """Apply one human action, then run the computer's reply turn.

    Mutates `state` in place; deterministic for a given (seed, action sequence).
    """
    if state.phase == "game_over":
        return _reject("game_over", "The game is over.")

    state.action_log.append(action)

    if action.player != state.current_player:
        return _reject("not_your_turn", "Not your turn.")
    if isinstance(action, PlayCardAction):
        return _play_card(state, action)
    if isinstance(action, DrawAction):
        return _draw(state, action)
    if isinstance(action, PlaceCardAction):
        return _place(state, action)
    return _reject("unknown_action", "Unknown action.")


def draw_card(state: GameState) -> StepResult:
    return step(state, DrawAction(player=HUMAN))


def play_card(state: GameState, hand_index: int) -> StepResult:
    return step(state, PlayCardAction(hand_index=hand_index, player=HUMAN))


def place_forced(state: GameState, hand_index: int) -> StepResult:
    return step(state, PlaceCardAction(hand_index=hand_index, player=HUMAN))


def is_game_over(state: GameState) -> bool:
    return state.phase == "game_over"


def final_scores(state: GameState) -> FinalScores:
    if state.finisher is None:
        raise ValueError("The game is not over yet.")
    finisher = state.finisher
    human_raw = raw_score(state.human, finisher == HUMAN)
    computer_raw = raw_score(state.computer, finisher == COMPUTER)
    human = max(human_raw, 0)
    computer = max(computer_raw, 0)
    winner: int | None = None
    if human > computer:
        winner = HUMAN
    elif computer > human:
        winner = COMPUTER
    return FinalScores(
        human=human,
        computer=computer,
        human_raw=human_raw,
        computer_raw=computer_raw,
        finisher=finisher,
        winner=winner,
    )


def current_state(state: GameState) -> GameView:
    return GameView(
        hand=tuple(state.human.hand),
        center_row=tuple(state.center_row),
        stock_count=len(state.stock),
        discard_count=len(state.discard),
        opponent_hand_count=len(state.computer.hand),
        score_pile_counts=(len(state.human.score_pile), len(state.computer.score_pile)),
        current_player=state.current_player,
        phase=state.phase,
        has_drawn=state.has_drawn,
    )


def replay(seed: int, actions: Iterable[Action], config: GameConfig | None = None) -> GameState:
    state = new_game(seed=seed, config=config)
    for a in actions:
        step(state, a)
        if is_game_over(state):
            break
    return state
