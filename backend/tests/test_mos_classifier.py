"""Tests for keyword classification of occupation codes."""

import pytest

from models.schemas.occupation import OccupationCategory as Cat
from services.mos_classifier import CATEGORY_KEYWORDS, classify


@pytest.mark.parametrize("code, expected", [
    ("25B", Cat.CYBER),
    ("17C", Cat.CYBER),
    ("11B", Cat.INFANTRY),
    ("0311", Cat.INFANTRY),
    ("68W", Cat.MEDICAL),
    ("HM corpsman", Cat.MEDICAL),
    ("92A", Cat.LOGISTICS),
    ("88M", Cat.LOGISTICS),
    ("35F", Cat.INTEL),
    ("15T", Cat.AVIATION),
    ("12B", Cat.ENGINEERING),
    ("police officer", Cat.LAW_ENFORCEMENT),
    ("paralegal", Cat.ADMIN),
    ("culinary specialist", Cat.FOOD_SERVICE),
    ("cook", Cat.FOOD_SERVICE),
])
def test_known_codes(code, expected):
    assert classify(code) is expected


def test_case_and_whitespace_insensitive():
    assert classify("  68w  ") is Cat.MEDICAL


def test_earlier_category_wins_over_later():
    # "35t" is a cyber keyword, "35" an intel one
    assert classify("35T") is Cat.CYBER


def test_combat_engineer_is_infantry():
    # "combat" matches before engineering's "combat engineer" is reached
    assert classify("combat engineer") is Cat.INFANTRY


def test_substring_matching_not_word_boundary():
    # "42A" contains aviation's "2a" before admin's "42" is reached
    assert classify("42A") is Cat.AVIATION


@pytest.mark.parametrize("code", ["", "   ", None])
def test_blank_is_unclassified(code):
    assert classify(code) is None


def test_no_keyword_is_unclassified():
    assert classify("zzz") is None


def test_keyword_table_covers_every_category_once():
    categories = [category for category, _ in CATEGORY_KEYWORDS]
    assert categories == list(Cat)
