from .user_service import UserService
from .employee_service import EmployeeService

__all__ = ["UserService", "EmployeeService"]
