from app.models.behavior import Behavior
from app.models.class_model import SchoolClass
from app.models.group_work import Group, GroupMembership, GroupWork, GroupWorkBehavior
from app.models.group_work_award import GroupWorkAward
from app.models.point import Point
from app.models.student import Student
from app.models.teacher import Teacher

__all__ = [
    "Teacher",
    "SchoolClass",
    "Student",
    "Behavior",
    "Point",
    "GroupWork",
    "Group",
    "GroupMembership",
    "GroupWorkBehavior",
    "GroupWorkAward",
]
