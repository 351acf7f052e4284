
"""Keyboard and touch-swipe mapping to game actions"""
from typing import Optional
import pygame

KEY_ACTIONS = {
    pygame.K_LEFT: "left",
    pygame.K_RIGHT: "right",
    pygame.K_DOWN: "down",
    pygame.K_UP: "rotate",
}

class SwipeTracker:
    """
    Turns a finger down/up pair into one action.

    • Horizontal travel beyond the threshold -> left/right
    • Downward travel beyond the threshold -> down
    • Anything shorter counts as a tap -> rotate
    Coordinates are pygame's normalized 0..1 touch positions.
    """
    def __init__(self, threshold: float = 0.05):
        self.threshold = threshold
        self.start = None

    def down(self, x: float, y: float):
        self.start = (x, y)

    def up(self, x: float, y: float) -> Optional[str]:
        if self.start is None: return None
        dx, dy = x - self.start[0], y - self.start[1]
        self.start = None
        if abs(dx) < self.threshold and abs(dy) < self.threshold:
            return "rotate"
        if abs(dx) >= abs(dy):
            return "right" if dx > 0 else "left"
        return "down" if dy > 0 else None

def action_for_event(event, swipe: SwipeTracker) -> Optional[str]:
    if event.type == pygame.KEYDOWN:
        return KEY_ACTIONS.get(event.key)
    if event.type == pygame.FINGERDOWN:
        swipe.down(event.x, event.y); return None
    if event.type == pygame.FINGERUP:
        return swipe.up(event.x, event.y)
    return None
