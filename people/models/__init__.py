# people/models/__init__.py
from .team import Team
from .job_role import JobRole
from .person import Person
from .one_on_one import OneOnOne

__all__ = ["Team", "JobRole", "Person", "OneOnOne"]
