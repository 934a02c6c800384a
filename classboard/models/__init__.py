from classboard.models.activity import Activity, ActivityStatus
from classboard.models.class_model import SchoolClass
from classboard.models.teacher import Teacher

__all__ = [
    "Teacher",
    "SchoolClass",
    "Activity",
    "ActivityStatus",
]
