import math
from datetime import date, datetime, timezone

from models.serialize import serialize_document

REQUIRED_FIELDS = (
    "first_name",
    "last_name",
    "email",
    "position",
    "salary",
    "date_of_joining",
    "department",
)
IMAGE_FIELD = "profileImageUrl"

# BSON integers are signed 64-bit
INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


def parse_salary(value):
    if isinstance(value, bool):
        raise ValueError("salary must be a number")
    if isinstance(value, (int, float)):
        number = value
    else:
        text = str(value).strip()
        try:
            number = int(text)
        except ValueError:
            number = float(text)
    if not math.isfinite(number):
        raise ValueError("salary must be a finite number")
    if isinstance(number, int) and not INT64_MIN <= number <= INT64_MAX:
        raise ValueError("salary is out of range")
    return number


def parse_date(value):
    # BSON has no plain date type, so joining dates are stored as midnight UTC
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day, tzinfo=timezone.utc)

    text = str(value).strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    parsed = datetime.fromisoformat(text)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


PARSERS = {
    "salary": parse_salary,
    "date_of_joining": parse_date,
}


def is_blank(value):
    return value is None or (isinstance(value, str) and not value.strip())


def clean_fields(fields):
    """
    Keep only known employee fields, coerced to their stored types.
    Raises ValueError naming the first field that does not parse.
    """
    cleaned = {}
    for name in REQUIRED_FIELDS:
        if name not in fields or is_blank(fields[name]):
            continue
        value = fields[name]
        parser = PARSERS.get(name)
        if parser:
            try:
                value = parser(value)
            except (TypeError, ValueError):
                raise ValueError(f"Invalid value for {name}")
        elif isinstance(value, str):
            value = value.strip()
        cleaned[name] = value
    return cleaned


class Employee:

    def __init__(self, first_name, last_name, email, position, salary,
                 date_of_joining, department, profile_image_url=None,
                 created_at=None, updated_at=None):
        self.first_name = first_name
        self.last_name = last_name
        self.email = email
        self.position = position
        self.salary = salary
        self.date_of_joining = date_of_joining
        self.department = department

        # Relative /uploads/<name> path, only set when an image was supplied
        self.profile_image_url = profile_image_url

        now = datetime.now(timezone.utc)
        self.created_at = created_at or now
        self.updated_at = updated_at or now

    def to_dict(self):
        doc = {
            "first_name": self.first_name,
            "last_name": self.last_name,
            "email": self.email,
            "position": self.position,
            "salary": self.salary,
            "date_of_joining": self.date_of_joining,
            "department": self.department,
            "created_at": self.created_at,
            "updated_at": self.updated_at
        }
        if self.profile_image_url:
            doc[IMAGE_FIELD] = self.profile_image_url
        return doc

    @staticmethod
    def serialize(doc):
        return serialize_document(doc)
