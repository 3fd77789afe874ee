import logging
from datetime import datetime, timezone

from pymongo.errors import DuplicateKeyError

from models.employee import IMAGE_FIELD, REQUIRED_FIELDS, Employee, clean_fields, is_blank
from utils.errors import DuplicateEmail, NotFound, ValidationFailure

logger = logging.getLogger(__name__)

DUPLICATE_EMAIL = "Employee with this email already exists"
NOT_FOUND = "Employee not found."


class EmployeeService:
    """
    CRUD and search over the employees store.

    `uploads` stores a profile image and returns its public path.
    `on_image_superseded`, if given, is called with the old image path when an
    update replaces it or a delete drops its record. Files are never removed here.
    """

    def __init__(self, store, uploads, on_image_superseded=None):
        self.store = store
        self.uploads = uploads
        self.on_image_superseded = on_image_superseded

    def list(self):
        return self.store.find_all()

    def search(self, department=None, position=None):
        return self.store.search({"department": department, "position": position})

    def get_by_id(self, employee_id):
        employee = self.store.find_by_id(employee_id)
        if not employee:
            raise NotFound(NOT_FOUND)
        return employee

    def create(self, fields, upload=None):
        """Validate, store the optional image, insert. Returns (id, image_path)."""
        if any(is_blank(fields.get(name)) for name in REQUIRED_FIELDS):
            raise ValidationFailure("All fields are required")
        try:
            cleaned = clean_fields(fields)
        except ValueError as e:
            raise ValidationFailure(str(e))

        if self.store.find_one(email=cleaned["email"]):
            raise DuplicateEmail(DUPLICATE_EMAIL)

        image_path = self.uploads.save(upload) if upload is not None else None

        employee = Employee(profile_image_url=image_path, **cleaned)
        try:
            employee_id = self.store.insert(employee.to_dict())
        except DuplicateKeyError:
            logger.warning("Employee insert rejected by unique index")
            raise DuplicateEmail(DUPLICATE_EMAIL)

        logger.info("Employee %s created", employee_id)
        return employee_id, image_path

    def update(self, employee_id, fields, upload=None):
        """Merge the supplied fields onto the stored record."""
        try:
            changes = clean_fields(fields)
        except ValueError as e:
            raise ValidationFailure(str(e))

        # Existence and email checks come before anything is written to disk
        current = self.store.find_by_id(employee_id)
        if not current:
            raise NotFound(NOT_FOUND)
        if "email" in changes:
            holder = self.store.find_one(email=changes["email"])
            if holder and holder["_id"] != current["_id"]:
                raise DuplicateEmail(DUPLICATE_EMAIL)

        if upload is not None:
            changes[IMAGE_FIELD] = self.uploads.save(upload)
        changes["updated_at"] = datetime.now(timezone.utc)

        try:
            previous = self.store.update_by_id(employee_id, changes, return_updated=False)
        except DuplicateKeyError:
            logger.warning("Employee update rejected by unique index")
            raise DuplicateEmail(DUPLICATE_EMAIL)
        if not previous:
            raise NotFound(NOT_FOUND)

        old_image = previous.get(IMAGE_FIELD)
        if IMAGE_FIELD in changes and old_image and old_image != changes[IMAGE_FIELD]:
            self._superseded(old_image)

        logger.info("Employee %s updated", employee_id)

    def delete(self, employee_id):
        deleted = self.store.delete_by_id(employee_id)
        if not deleted:
            raise NotFound(NOT_FOUND)

        if deleted.get(IMAGE_FIELD):
            self._superseded(deleted[IMAGE_FIELD])
        logger.info("Employee %s deleted", employee_id)

    def _superseded(self, path):
        # The record change is already stored; a failing hook must not turn it into an error
        if self.on_image_superseded is None:
            return
        try:
            self.on_image_superseded(path)
        except Exception:
            logger.exception("Superseded image hook failed for %s", path)
