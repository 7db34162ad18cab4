"""
Designer override rules (bans.enforce_bans).
Run from project root: python -m pytest tests/ -v
"""
import unittest

from brandforge.bans import enforce_bans


def _frange(start, stop, step):
    x = start
    while x <= stop:
        yield x
        x += step


class TestEnforceBans(unittest.TestCase):

    def test_yellow_green_saturation_capped(self):
        for h in _frange(65, 85, 0.5):
            for s in (50.5, 60, 80, 100):
                _, s2, _ = enforce_bans(h, s, 50)
                self.assertLessEqual(s2, 48)

    def test_yellow_green_low_saturation_untouched(self):
        self.assertEqual(enforce_bans(70, 50, 50), (70, 50, 50))

    def test_pure_yellow_retargeted(self):
        for h in _frange(50, 60, 0.25):
            for s, l in ((30, 30), (60, 50), (95, 70)):
                h2, _, _ = enforce_bans(h, s, l)
                self.assertIn(h2, (35.0, 45.0))

    def test_pure_yellow_direction(self):
        self.assertEqual(enforce_bans(55, 50, 50)[0], 45.0)
        self.assertEqual(enforce_bans(60, 50, 50)[0], 45.0)
        self.assertEqual(enforce_bans(54.9, 50, 50)[0], 35.0)
        self.assertEqual(enforce_bans(50, 50, 50)[0], 35.0)

    def test_neon_lightness_capped(self):
        for s in (85.5, 90, 100):
            for l in (60.5, 75, 100):
                _, _, l2 = enforce_bans(200, s, l)
                self.assertLessEqual(l2, 58)

    def test_neon_boundaries_untouched(self):
        self.assertEqual(enforce_bans(200, 85, 70), (200, 85, 70))
        self.assertEqual(enforce_bans(200, 90, 60), (200, 90, 60))

    def test_muddy_brown_boosted(self):
        self.assertEqual(enforce_bans(30, 30, 40), (30, 55.0, 40))
        self.assertEqual(enforce_bans(20, 20, 30), (20, 55.0, 30))

    def test_rules_see_previous_adjustments(self):
        """Yellow → 35° lands in the brown zone, so rule 4 fires on the same pass."""
        self.assertEqual(enforce_bans(52, 30, 40), (35.0, 55.0, 40))

    def test_yellow_then_neon(self):
        self.assertEqual(enforce_bans(57, 90, 70), (45.0, 90, 58.0))

    def test_safe_colors_unchanged(self):
        for hsl in ((210, 65, 47.5), (0, 80, 50), (150, 40, 96), (300, 20, 12)):
            self.assertEqual(enforce_bans(*hsl), hsl)


if __name__ == "__main__":
    unittest.main()
