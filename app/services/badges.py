import random

from app.schemas.awards import BadgeOut

_BADGES_DIR = "/images/Reward Badges"


def _badge(badge_id: str, name: str, description: str, picture: int, behavior_type: str) -> BadgeOut:
    return BadgeOut(
        id=badge_id,
        name=name,
        description=description,
        image_path=f"{_BADGES_DIR}/Picture{picture}.png",
        behavior_types=[behavior_type],
    )


REWARD_BADGES: tuple[BadgeOut, ...] = (
    _badge("collaboration-star", "Collaboration Star", "Excellent teamwork and cooperation", 23, "GROUP_WORK"),
    _badge("leadership-crown", "Leadership Crown", "Outstanding leadership skills", 24, "GROUP_WORK"),
    _badge("communication-champion", "Communication Champion", "Clear and effective communication", 25, "GROUP_WORK"),
    _badge("problem-solver", "Problem Solver", "Creative problem-solving abilities", 26, "GROUP_WORK"),
    _badge("active-participant", "Active Participant", "Engaged and involved in activities", 27, "GROUP_WORK"),
    _badge("respectful-listener", "Respectful Listener", "Attentive and respectful listening", 28, "GROUP_WORK"),
    _badge("idea-sharer", "Idea Sharer", "Contributes valuable ideas", 29, "GROUP_WORK"),
    _badge("team-supporter", "Team Supporter", "Supports and encourages teammates", 30, "GROUP_WORK"),
    _badge("instruction-follower", "Instruction Follower", "Follows directions carefully", 31, "INDIVIDUAL"),
    _badge("time-manager", "Time Manager", "Completes tasks on time", 32, "INDIVIDUAL"),
    _badge("focused-learner", "Focused Learner", "Maintains attention and focus", 33, "INDIVIDUAL"),
    _badge("responsible-student", "Responsible Student", "Takes responsibility for learning", 34, "INDIVIDUAL"),
)


def badges_for_type(behavior_type: str) -> list[BadgeOut]:
    return [badge for badge in REWARD_BADGES if behavior_type in badge.behavior_types]


def get_badge(badge_id: str) -> BadgeOut | None:
    return next((badge for badge in REWARD_BADGES if badge.id == badge_id), None)


def pick_random_badge(behavior_type: str, rng: random.Random | None = None) -> BadgeOut:
    """Pick uniformly among badges tagged for ``behavior_type``.

    Earlier awards are not taken into account, so repeats are expected.
    """
    candidates = badges_for_type(behavior_type)
    if not candidates:
        raise ValueError(f"No badges configured for behavior type {behavior_type}")
    return (rng or random).choice(candidates)
