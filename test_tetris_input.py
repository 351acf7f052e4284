import unittest

import pygame

from tetris_input import SwipeTracker, action_for_event
from tetris_layout import Dims
from tetris_render import PALETTE, hex_color, palette_for


class KeyMappingTests(unittest.TestCase):
    def test_arrow_keys(self):
        swipe = SwipeTracker()
        for key, action in ((pygame.K_LEFT, "left"), (pygame.K_RIGHT, "right"),
                            (pygame.K_DOWN, "down"), (pygame.K_UP, "rotate")):
            ev = pygame.event.Event(pygame.KEYDOWN, key=key)
            self.assertEqual(action_for_event(ev, swipe), action)

    def test_other_keys_ignored(self):
        ev = pygame.event.Event(pygame.KEYDOWN, key=pygame.K_a)
        self.assertIsNone(action_for_event(ev, SwipeTracker()))

    def test_finger_events(self):
        swipe = SwipeTracker()
        down = pygame.event.Event(pygame.FINGERDOWN, x=0.5, y=0.5)
        up = pygame.event.Event(pygame.FINGERUP, x=0.2, y=0.52)
        self.assertIsNone(action_for_event(down, swipe))
        self.assertEqual(action_for_event(up, swipe), "left")


class SwipeTests(unittest.TestCase):
    def swipe(self, x0, y0, x1, y1):
        s = SwipeTracker(threshold=0.05)
        s.down(x0, y0)
        return s.up(x1, y1)

    def test_directions(self):
        self.assertEqual(self.swipe(0.5, 0.5, 0.8, 0.55), "right")
        self.assertEqual(self.swipe(0.5, 0.5, 0.1, 0.45), "left")
        self.assertEqual(self.swipe(0.5, 0.2, 0.52, 0.7), "down")

    def test_tap_rotates(self):
        self.assertEqual(self.swipe(0.5, 0.5, 0.51, 0.49), "rotate")

    def test_upward_swipe_does_nothing(self):
        self.assertIsNone(self.swipe(0.5, 0.8, 0.5, 0.2))

    def test_up_without_down(self):
        self.assertIsNone(SwipeTracker().up(0.1, 0.1))


class LayoutPaletteTests(unittest.TestCase):
    def test_board_geometry(self):
        d = Dims(cell=30)
        self.assertEqual(d.board_rect, (16, 16, 300, 600))
        self.assertEqual(d.cell_rect(9, 19), (16 + 270, 16 + 570, 30, 30))
        self.assertEqual(d.total_w, 16 * 3 + 300 + 200)

    def test_palette(self):
        self.assertEqual(len(PALETTE), 8)
        self.assertEqual(hex_color("#d64e12"), (0xd6, 0x4e, 0x12))
        self.assertEqual(palette_for("light")[0], (255, 255, 255))
        self.assertEqual(palette_for("dark")[1:], PALETTE[1:])


if __name__ == "__main__":
    unittest.main()
