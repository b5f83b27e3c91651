from .user import User
from .project import Project
from .task import Task

__all__ = [
    'User',
    'Project',
    'Task'
]
