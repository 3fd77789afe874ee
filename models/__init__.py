# models/__init__.py

from .users import User
from .employee import Employee
from .store import DocumentStore

__all__ = [
    "User",
    "Employee",
    "DocumentStore"
]
