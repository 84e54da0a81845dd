"""Key bindings -> engine commands"""
from typing import Optional
import pygame
from tetris_game import Command

KEYMAP = {
    pygame.K_LEFT: Command.MOVE_LEFT,  pygame.K_a: Command.MOVE_LEFT,
    pygame.K_RIGHT: Command.MOVE_RIGHT, pygame.K_d: Command.MOVE_RIGHT,
    pygame.K_DOWN: Command.SOFT_DROP,  pygame.K_s: Command.SOFT_DROP,
    pygame.K_UP: Command.HARD_DROP,    pygame.K_w: Command.HARD_DROP,
    pygame.K_j: Command.ROTATE_LEFT,
    pygame.K_k: Command.ROTATE_RIGHT,
    pygame.K_SPACE: Command.HOLD,
    pygame.K_p: Command.TOGGLE_PAUSE,
}

RESTART_KEY = pygame.K_r
QUIT_KEY = pygame.K_ESCAPE

def command_for(key: int) -> Optional[Command]:
    return KEYMAP.get(key)
