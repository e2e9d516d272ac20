import pytest

from gemini_office.core.types import SlideRecord
from gemini_office.materialize.slides import (
    SlideDeckParser,
    SlidePayload,
    clean_bullet,
    clean_title,
)

pytestmark = pytest.mark.unit


@pytest.fixture
def parser():
    return SlideDeckParser()


class TestStructuredStrategy:
    def test_points_array(self, parser):
        deck = parser.parse('[{"title":"Intro","points":["A","B"]}]')

        assert deck == (SlideRecord("Intro", ("A", "B")),)

    def test_bullets_alias_and_missing_bullets(self, parser):
        deck = parser.parse(
            '[{"title": "One", "bullets": ["x"]}, {"title": "Two"}]'
        )

        assert deck == (SlideRecord("One", ("x",)), SlideRecord("Two", ()))

    def test_json_embedded_in_prose(self, parser):
        text = (
            "Here are your slides:\n```json\n"
            '[{"title": "Plan", "points": ["Scope", "Budget"]},\n'
            ' {"title": "Risks", "points": ["Timeline"]}]\n'
            "```\nLet me know if you need more."
        )

        deck = parser.parse(text)

        assert [s.title for s in deck] == ["Plan", "Risks"]
        assert deck[0].bullets == ("Scope", "Budget")

    def test_scalar_bullets_are_coerced_to_strings(self, parser):
        deck = parser.parse('[{"title": "Numbers", "points": [1, 2.5, true]}]')

        assert deck[0].bullets == ("1", "2.5", "True")

    def test_single_string_points_become_one_bullet(self, parser):
        deck = parser.parse('[{"title": "T", "points": "only one"}]')

        assert deck[0].bullets == ("only one",)

    def test_empty_objects_are_dropped(self, parser):
        deck = parser.parse('[{"title": "Kept"}, {"title": "  ", "points": []}]')

        assert deck == (SlideRecord("Kept", ()),)

    def test_payload_ignores_unknown_keys(self):
        payload = SlidePayload.model_validate(
            {"title": " T ", "points": [" a "], "notes": "x"}
        )

        assert payload.to_record() == SlideRecord("T", ("a",))

    def test_trailing_brackets_in_prose_do_not_hide_the_deck(self, parser):
        text = (
            '[{"title": "Plan", "points": ["Scope"]}]\n'
            "Use the shape [{title, points}] for more slides."
        )

        assert parser.parse(text) == (SlideRecord("Plan", ("Scope",)),)

    def test_later_array_is_used_when_first_is_not_a_deck(self, parser):
        text = (
            'Ignore [{"broken": ] this.\n'
            '[{"title": "Real", "points": ["Yes"]}]'
        )

        assert parser.parse(text) == (SlideRecord("Real", ("Yes",)),)

    def test_deeply_nested_json_falls_back_without_raising(self, parser):
        depth = 200_000
        text = '[{"title":"x","points":' + "[" * depth + "]" * depth + "}]"

        deck = parser.parse(text)

        assert len(deck) == 1
        assert deck[0].title.startswith("[")


class TestFallbackStrategy:
    def test_title_label_and_bullets(self, parser):
        deck = parser.parse("TITLE: Results\n- Point one\n- Point two")

        assert deck == (SlideRecord("Results", ("Point one", "Point two")),)

    def test_malformed_json_falls_through(self, parser):
        deck = parser.parse('[{"title": "Broken", "points": ["a",]}')

        assert len(deck) == 1
        assert deck[0].title.startswith("[")

    def test_preamble_is_dropped_before_title(self, parser):
        deck = parser.parse("Sure! Here's a slide.\n## Quarterly Review\n* Revenue up\n• Costs down")

        assert deck == (SlideRecord("Quarterly Review", ("Revenue up", "Costs down")),)

    def test_unmarked_lines_are_bullets_too(self, parser):
        deck = parser.parse("Agenda\nWelcome\n  - Demo  ")

        assert deck[0].bullets == ("Welcome", "Demo")

    def test_title_only(self, parser):
        assert parser.parse("**Overview**") == (SlideRecord("Overview", ()),)

    @pytest.mark.parametrize("text", ["", "  \n ", "Sure, here you go:"])
    def test_nothing_left_yields_empty_deck(self, parser, text):
        assert parser.parse(text) == ()


class TestCleaning:
    @pytest.mark.parametrize(
        ("line", "expected"),
        [
            ("# Title: Hello", "Hello"),
            ("**Title:** Hello", "Hello"),
            ("title:Hello", "Hello"),
            ("> Quote title", "Quote title"),
        ],
    )
    def test_clean_title(self, line, expected):
        assert clean_title(line) == expected

    @pytest.mark.parametrize(
        ("line", "expected"),
        [
            ("- item", "item"),
            ("* item", "item"),
            ("• item", "item"),
            ("**Bold** lead", "**Bold** lead"),
            ("- - nested", "- nested"),
        ],
    )
    def test_clean_bullet(self, line, expected):
        assert clean_bullet(line) == expected
