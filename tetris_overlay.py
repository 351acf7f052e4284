
import pygame

ACCEPT_KEYS = (pygame.K_y, pygame.K_RETURN, pygame.K_KP_ENTER)
DECLINE_KEYS = (pygame.K_n, pygame.K_ESCAPE)

class GameOverPrompt:
    """Modal "play again?" box shown a moment after the game ends."""
    def __init__(self):
        self.active = False
        self.score = 0

    def show(self, score: int):
        self.active = True
        self.score = score

    def hide(self):
        self.active = False

    def handle(self, e):
        """Return True (accept), False (decline) or None (not answered)."""
        if not self.active or e.type != pygame.KEYDOWN: return None
        if e.key in ACCEPT_KEYS: self.hide(); return True
        if e.key in DECLINE_KEYS: self.hide(); return False
        return None

    def draw(self, screen, font, big_font, w, h):
        if not self.active: return
        s = pygame.Surface((w - 80, 160), pygame.SRCALPHA); s.fill((20, 25, 40, 230))
        top = (h - 160) // 2
        screen.blit(s, (40, top))
        lines = [
            (big_font, "Game Over!", (255, 220, 220)),
            (font, f"Your score: {self.score}", (230, 240, 255)),
            (font, "Play again?  Y / N", (200, 210, 235)),
        ]
        y = top + 24
        for f, txt, col in lines:
            r = f.render(txt, True, col)
            screen.blit(r, r.get_rect(midtop=(w // 2, y))); y += r.get_height() + 14
