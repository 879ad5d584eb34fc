from .user import Role, User
from .people import Instructor, Student
from .course import Course, InstructorCourse

__all__ = [
    "Role", "User", "Instructor", "Student", "Course", "InstructorCourse",
]
