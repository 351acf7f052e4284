import os
import tempfile
import unittest

from tetris_config import CONFIG, load_theme, save_theme, toggle_theme


class ThemeTests(unittest.TestCase):
    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.path = os.path.join(self.tmp.name, "sub", "theme.json")

    def tearDown(self):
        self.tmp.cleanup()

    def test_default_is_dark(self):
        self.assertEqual(load_theme(self.path), "dark")

    def test_round_trip(self):
        save_theme("light", self.path)
        self.assertEqual(load_theme(self.path), "light")

    def test_garbage_file_falls_back(self):
        os.makedirs(os.path.dirname(self.path))
        with open(self.path, "w") as f:
            f.write("not json")
        self.assertEqual(load_theme(self.path), "dark")
        with open(self.path, "w") as f:
            f.write('{"theme": "neon"}')
        self.assertEqual(load_theme(self.path), "dark")
        with open(self.path, "w") as f:
            f.write("[1, 2]")
        self.assertEqual(load_theme(self.path), "dark")

    def test_unwritable_location_fails_soft(self):
        blocker = os.path.join(self.tmp.name, "blocker")
        with open(blocker, "w") as f:
            f.write("x")
        path = os.path.join(blocker, "theme.json")
        self.assertFalse(save_theme("light", path))
        self.assertEqual(load_theme(path), "dark")

    def test_save_reports_success(self):
        self.assertTrue(save_theme("dark", self.path))

    def test_unknown_theme_not_saved(self):
        with self.assertRaises(ValueError):
            save_theme("neon", self.path)

    def test_toggle(self):
        self.assertEqual(toggle_theme("dark"), "light")
        self.assertEqual(toggle_theme("light"), "dark")

    def test_defaults(self):
        self.assertEqual(CONFIG["TICK_MS"], 500)
        self.assertEqual(CONFIG["GAME_OVER_PROMPT_MS"], 100)


if __name__ == "__main__":
    unittest.main()
