"""
Unit tests for trait inference and input validation.
Run from project root: python -m pytest tests/ -v
Or: python -m unittest discover -s tests -p "test_*.py" -v
"""
import sys
import unittest
from pathlib import Path

# Project root on path so "from blueprint. ..." works
ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from blueprint.interpretation import (
    SceneTraits,
    ValidationError,
    detect_keyword,
    extract_effects,
    extract_location,
    infer_traits,
    validate_details,
)
from blueprint.data.keywords import MOOD_KEYWORDS, TIME_KEYWORDS


class TestValidation(unittest.TestCase):
    """Minimum length after trimming; bilingual message."""

    def test_short_input_rejected(self):
        for text in ("", "   ", "short", "123456789", "   abc def   "):
            with self.assertRaises(ValidationError):
                validate_details(text)

    def test_trimmed_length_counts(self):
        self.assertEqual(validate_details("1234567890"), "1234567890")
        padded = "     abcdefghij     "
        self.assertEqual(validate_details(padded), padded)
        with self.assertRaises(ValidationError):
            validate_details("         123456789         ")

    def test_message_is_bilingual(self):
        with self.assertRaises(ValidationError) as ctx:
            validate_details("tiny")
        self.assertIn("please add more detail", str(ctx.exception))
        self.assertIn("कृपया", ctx.exception.message)

    def test_custom_min_length(self):
        with self.assertRaises(ValidationError) as ctx:
            validate_details("fifteen chars!!", min_length=20)
        self.assertEqual(ctx.exception.min_length, 20)

    def test_non_string_rejected(self):
        with self.assertRaises(ValidationError):
            validate_details(None)  # type: ignore[arg-type]

    def test_is_value_error(self):
        self.assertTrue(issubclass(ValidationError, ValueError))


class TestKeywordDetection(unittest.TestCase):
    """First candidate in vocabulary order wins, regardless of position in text."""

    def test_vocabulary_order_beats_text_order(self):
        self.assertLess(MOOD_KEYWORDS.index("tense"), MOOD_KEYWORDS.index("epic"))
        self.assertEqual(detect_keyword(MOOD_KEYWORDS, "An epic duel, tense and quiet"), "tense")
        self.assertEqual(detect_keyword(MOOD_KEYWORDS, "tense then epic"), "tense")

    def test_case_insensitive(self):
        self.assertEqual(detect_keyword(MOOD_KEYWORDS, "A MYSTERIOUS figure"), "mysterious")

    def test_substring_match(self):
        # "midnight" contains "night", which is declared first
        self.assertEqual(detect_keyword(TIME_KEYWORDS, "at midnight"), "night")

    def test_no_match(self):
        self.assertIsNone(detect_keyword(MOOD_KEYWORDS, "a quiet meadow"))


class TestEffects(unittest.TestCase):
    def test_collects_all_in_vocabulary_order(self):
        self.assertEqual(
            extract_effects("Sparks fly while fire and smoke rise"),
            ("fire", "smoke", "sparks"),
        )

    def test_fallback_pair(self):
        self.assertEqual(
            extract_effects("A quiet meadow with flowers blooming"),
            ("atmospheric dust motes", "volumetric light shafts"),
        )

    def test_each_term_once(self):
        self.assertEqual(extract_effects("fire fire FIRE"), ("fire",))


class TestLocation(unittest.TestCase):
    def test_first_preposition_wins(self):
        location = extract_location("A battle in Krakow, at dawn")
        self.assertIn("Krakow", location)
        self.assertEqual(location, "Krakow")

    def test_stops_at_period(self):
        self.assertEqual(extract_location("Chase inside the old reactor. Alarms blare"), "the old reactor")

    def test_first_sentence_fallback(self):
        self.assertEqual(extract_location("Lava flows everywhere! Then calm"), "Lava flows everywhere")

    def test_short_first_sentence_uses_phrase(self):
        self.assertEqual(extract_location("Hello! Bright wonder"), "vast cinematic expanse")

    def test_preposition_not_word_bounded(self):
        # "rain soaked" reads as "in soaked ..."
        self.assertEqual(extract_location("A rain soaked alley"), "soaked alley")


class TestInferTraits(unittest.TestCase):
    def test_defaults_when_nothing_matches(self):
        traits = infer_traits("A quiet meadow with flowers blooming")
        self.assertEqual(traits.mood, "ambient")
        self.assertEqual(traits.time_of_day, "magic hour")
        self.assertEqual(traits.weather, "clear")
        self.assertEqual(traits.style, "hybrid")
        self.assertFalse(traits.has_characters)
        self.assertEqual(traits.effects, ("atmospheric dust motes", "volumetric light shafts"))
        self.assertEqual(traits.location, "A quiet meadow with flowers blooming")

    def test_rainy_night_chase(self):
        traits = infer_traits("A rainy night chase, drone shot, tense mood")
        self.assertEqual(traits.mood, "tense")
        self.assertEqual(traits.time_of_day, "night")
        self.assertEqual(traits.weather, "rain")
        self.assertEqual(traits.style, "drone")
        self.assertEqual(traits.effects, ("rain",))

    def test_characters(self):
        self.assertTrue(infer_traits("A soldier crosses the bridge").has_characters)
        self.assertTrue(infer_traits("A CROWD gathers at the gate").has_characters)
        self.assertTrue(infer_traits("नर्तक मंचावर नाचतो आहे").has_characters)
        self.assertFalse(infer_traits("An empty street after closing").has_characters)

    def test_traits_are_frozen(self):
        traits = infer_traits("A rainy night chase, drone shot, tense mood")
        with self.assertRaises(Exception):
            traits.mood = "epic"  # type: ignore[misc]

    def test_dict_form(self):
        traits = infer_traits("Handheld coverage of a crowd at sunrise")
        d = traits.to_dict()
        self.assertEqual(d["timeOfDay"], "sunrise")
        self.assertIs(d["hasCharacters"], True)
        self.assertIsInstance(d["effects"], list)
        self.assertEqual(SceneTraits.from_dict(d), traits)


if __name__ == "__main__":
    unittest.main()
