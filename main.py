import logging
import pygame, sys
from tetris_config import CONFIG
from tetris_game import Game
from tetris_input import command_for, RESTART_KEY, QUIT_KEY
from tetris_layout import compute_dims
from tetris_render import RenderAssets

logger = logging.getLogger("tetris")


def main():
    logging.basicConfig(level=CONFIG["LOG_LEVEL"], format='[TETRIS] %(asctime)s - %(levelname)s: %(message)s')
    pygame.init()
    pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN])

    cols, rows = CONFIG["COLS"], CONFIG["ROWS"]
    dims = compute_dims(cols, rows)
    screen = pygame.display.set_mode((dims.total_w, dims.total_h))
    pygame.display.set_caption("Tetris")
    font = pygame.font.SysFont(None, 22)
    big_font = pygame.font.SysFont(None, 36)

    render = RenderAssets(dims, cols, rows, font, big_font)
    clock = pygame.time.Clock()
    game = Game(cols, rows, seed=CONFIG["SEED"])
    logger.info("window %dx%d, seed %s", dims.total_w, dims.total_h, CONFIG["SEED"])

    # gravity accumulator; the engine only sees tick(now) at the cadence
    acc = 0

    while True:
        acc += clock.tick(CONFIG["FPS"])

        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                pygame.quit(); sys.exit()
            if e.type == pygame.KEYDOWN:
                if e.key == QUIT_KEY:
                    pygame.quit(); sys.exit()
                if e.key == RESTART_KEY and game.state.game_over:
                    logger.info("restart")
                    game.reset(); acc = 0
                    continue
                cmd = command_for(e.key)
                if cmd is not None:
                    game.handle_input(cmd, pygame.time.get_ticks())

        # cadence follows the line count after every clear
        if game.state.paused or game.state.game_over:
            acc = 0
        elif acc >= game.gravity_interval():
            acc = 0
            game.tick(pygame.time.get_ticks())

        render.draw(screen, game.state)
        pygame.display.flip()


if __name__ == '__main__':
    main()
