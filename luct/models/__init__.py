from .user import User, UserRole
from .lecture_class import Class
from .report import Report
from .course import Course
