
import pygame, sys
from tetris_config import CONFIG, load_theme, save_theme, toggle_theme
from tetris_game import GameState
from tetris_input import SwipeTracker, action_for_event
from tetris_layout import compute_dims
from tetris_overlay import GameOverPrompt
from tetris_render import Renderer
from tetris_rng import PieceRandom
from tetris_scheduler import TickScheduler


def open_window(dims, caption="Tetris"):
    size = (dims.total_w, dims.total_h)
    try:
        screen = pygame.display.set_mode(size, pygame.DOUBLEBUF, vsync=1)
    except (TypeError, pygame.error):
        screen = pygame.display.set_mode(size, pygame.DOUBLEBUF)
    pygame.display.set_caption(caption)
    return screen


def main():
    pygame.init()
    pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN, pygame.FINGERDOWN, pygame.FINGERUP])

    dims = compute_dims()
    screen = open_window(dims)
    font = pygame.font.SysFont(None, 24)
    big_font = pygame.font.SysFont(None, 44)
    clock = pygame.time.Clock()

    theme = load_theme()
    render = Renderer(screen, dims, font, theme)
    scheduler = TickScheduler()
    prompt = GameOverPrompt()
    prompt_timer = None

    def on_game_over(score):
        nonlocal prompt_timer
        prompt_timer = scheduler.set_timeout(CONFIG["GAME_OVER_PROMPT_MS"], lambda: prompt.show(score))

    game = GameState(scheduler, render=render.draw, score=render.set_score,
                     game_over=on_game_over, rng=PieceRandom(CONFIG["SEED"]))

    def restart():
        nonlocal prompt_timer
        scheduler.cancel(prompt_timer)
        prompt_timer = None
        prompt.hide()
        game.restart_game()

    render.set_score(game.score)
    game.start_game()
    swipe = SwipeTracker()

    while True:
        dt = clock.tick(CONFIG["FPS"])

        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                pygame.quit(); sys.exit()
            if prompt.active:
                answer = prompt.handle(e)
                if answer: restart()
                continue
            if e.type == pygame.KEYDOWN:
                if e.key == pygame.K_r:
                    restart(); continue
                if e.key == pygame.K_t:
                    theme = toggle_theme(theme)
                    save_theme(theme)
                    render.set_theme(theme)
                    render.set_score(game.score)
                    continue
            action = action_for_event(e, swipe)
            if action:
                game.handle_input(action)

        scheduler.advance(dt)

        render.draw_frame(game.board, game.piece)
        prompt.draw(screen, font, big_font, dims.total_w, dims.total_h)
        pygame.display.flip()


if __name__ == '__main__':
    main()
