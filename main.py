"""
Skirmish - attack popup demo.
Hot-seat table for trying the attack popup, the turn countdown, the result
popup and the sacrifice button.

Keys:
    SPACE  deal a new attacking card and open the attack popup
    T      add 10 seconds to the shared turn time
    B      shuffle the opponent board
    S      select a new card from hand (sacrifice button)
    P      toggle PLAY / ATTACK phase
    ESC    cancel the popup / quit
"""
import logging
import random
import sys

import pygame

from skirmish.audio import AudioManager
from skirmish.card import Card
from skirmish.commands import (
    cmd_set_attack_mode, cmd_choose_target, cmd_confirm, cmd_cancel,
    cmd_request_sacrifice, cmd_dismiss_result,
)
from skirmish.constants import WINDOW_WIDTH, WINDOW_HEIGHT, FPS, Rank, Suit, GamePhase, AttackMode
from skirmish.controller import AttackController
from skirmish.countdown import FrameTicker
from skirmish.i18n import Translator
from skirmish.renderer import Renderer
from skirmish.settings import (
    get_language, get_sound_enabled, get_turn_time,
    get_result_display_time, get_tick_interval,
)
from skirmish.store import LocalGameStore, GameSnapshot
from skirmish.targets import HealthTarget

logger = logging.getLogger(__name__)

PLAYER = 1


def create_deck() -> list:
    """Two decks with jokers, every card with its own id."""
    deck = []
    card_id = 1
    for _ in range(2):
        for suit in (Suit.HEARTS, Suit.DIAMONDS, Suit.CLUBS, Suit.SPADES):
            for rank in Rank:
                if rank == Rank.JOKER:
                    continue
                deck.append(Card(rank, suit, card_id))
                card_id += 1
        for _ in range(2):
            deck.append(Card(Rank.JOKER, Suit.NONE, card_id))
            card_id += 1
    random.shuffle(deck)
    return deck


def deal_table(store: LocalGameStore, deck: list):
    """Deal a new attacker and opponent board into the store."""
    if len(deck) < 8:
        deck.extend(create_deck())
    store.update(
        attacking_card=deck.pop(),
        opponent_cards=tuple(deck.pop() for _ in range(random.randint(0, 4))),
        has_acted_this_turn=False,
    )


def handle_attack_click(controller: AttackController, element) -> None:
    """Translate a click on the attack popup into a command."""
    if element is None:
        return
    if element == 'health':
        cmd = cmd_set_attack_mode(PLAYER, AttackMode.HEALTH.value)
    elif element == 'unit':
        cmd = cmd_set_attack_mode(PLAYER, AttackMode.UNIT.value)
    elif element == 'confirm':
        cmd = cmd_confirm(PLAYER)
    elif element == 'cancel':
        cmd = cmd_cancel(PLAYER)
    else:
        _, index = element
        cmd = cmd_choose_target(PLAYER, index=index)

    result = controller.process_command(cmd)
    if not result.accepted:
        logger.debug(f"Command rejected: {result.error}")


def show_last_attack(controller: AttackController, store: LocalGameStore, shown: int) -> int:
    """Show the result popup for attacks the store received since last frame."""
    if len(store.attacks) <= shown:
        return shown
    intent = store.attacks[-1]
    attacker = intent.card or store.snapshot().attacking_card
    target = intent.target if intent.target is not None else HealthTarget()
    blocked = intent.target is not None and random.random() < 0.3
    if attacker is not None:
        controller.show_result(attacker, target, blocked)
    return len(store.attacks)


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s: %(message)s")
    pygame.init()
    window = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT), pygame.RESIZABLE)
    pygame.display.set_caption("Skirmish")
    clock = pygame.time.Clock()
    renderer = Renderer(window)

    deck = create_deck()
    store = LocalGameStore(GameSnapshot(
        opponent_health=30,
        turn_time_remaining=get_turn_time(),
        phase=GamePhase.PLAY,
    ))
    deal_table(store, deck)

    interval = get_tick_interval()
    controller = AttackController(
        store,
        player=PLAYER,
        audio=AudioManager(enabled=get_sound_enabled()),
        translator=Translator(get_language()),
        ticker_factory=lambda on_tick: FrameTicker(on_tick, interval),
        result_duration=get_result_display_time(),
    )

    shown_attacks = 0
    running = True
    with controller:
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False

                elif event.type == pygame.VIDEORESIZE:
                    window = pygame.display.set_mode((event.w, event.h), pygame.RESIZABLE)
                    renderer.handle_resize(window)

                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        if controller.is_open:
                            controller.process_command(cmd_cancel(PLAYER))
                        else:
                            running = False
                    elif event.key == pygame.K_SPACE and not controller.is_open:
                        deal_table(store, deck)
                        controller.open()
                    elif event.key == pygame.K_t:
                        snapshot = store.update(turn_time_remaining=controller.time_remaining + 10)
                        controller.sync(snapshot)
                    elif event.key == pygame.K_b:
                        cards = list(store.snapshot().opponent_cards)
                        random.shuffle(cards)
                        controller.sync(store.update(opponent_cards=tuple(cards[:-1])))
                    elif event.key == pygame.K_s and deck:
                        store.update(selected_cards=(deck.pop(),))
                    elif event.key == pygame.K_p:
                        phase = store.snapshot().phase
                        new_phase = GamePhase.ATTACK if phase == GamePhase.PLAY else GamePhase.PLAY
                        store.update(phase=new_phase)

                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    mx, my = renderer.screen_to_game_coords(*event.pos)
                    if controller.presenter.visible:
                        controller.process_command(cmd_dismiss_result(PLAYER))
                    elif controller.is_open:
                        handle_attack_click(controller, renderer.get_clicked_attack_element(mx, my))
                    elif renderer.sacrifice_rect and renderer.sacrifice_rect.collidepoint(mx, my):
                        controller.process_command(cmd_request_sacrifice(PLAYER))
                        if store.sacrifice_mode:
                            logger.info("Sacrifice mode on")

            dt = clock.tick(FPS) / 1000.0
            controller.update(dt)
            controller.pop_events()
            shown_attacks = show_last_attack(controller, store, shown_attacks)
            renderer.draw(controller, store.snapshot())

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
