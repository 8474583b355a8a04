import random

import pytest

from app.services.badges import REWARD_BADGES, badges_for_type, get_badge, pick_random_badge


def test_every_badge_is_tagged_with_a_known_type():
    for badge in REWARD_BADGES:
        assert badge.behavior_types
        assert set(badge.behavior_types) <= {"INDIVIDUAL", "GROUP_WORK"}


def test_badges_for_type_filters_catalog():
    group_badges = badges_for_type("GROUP_WORK")
    individual_badges = badges_for_type("INDIVIDUAL")
    assert len(group_badges) == 8
    assert len(individual_badges) == 4
    assert {badge.id for badge in group_badges}.isdisjoint(badge.id for badge in individual_badges)


def test_get_badge_by_id():
    assert get_badge("problem-solver").name == "Problem Solver"
    assert get_badge("problem-solver").image_path.endswith("Picture26.png")
    assert get_badge("missing") is None


def test_pick_random_badge_stays_within_type_and_allows_repeats():
    rng = random.Random(7)
    picks = [pick_random_badge("INDIVIDUAL", rng) for _ in range(40)]
    assert all("INDIVIDUAL" in badge.behavior_types for badge in picks)
    assert len({badge.id for badge in picks}) < len(picks)


def test_pick_random_badge_unknown_type():
    with pytest.raises(ValueError):
        pick_random_badge("TEAM")
