import logging
from datetime import timedelta

from pymongo.errors import DuplicateKeyError

from models.users import User
from utils.auth import hash_password, verify_password
from utils.errors import DuplicateEmail, InvalidCredentials, ValidationFailure
from utils.tokens import issue_token

logger = logging.getLogger(__name__)

# Same message for unknown email and wrong password
INVALID_CREDENTIALS = "Invalid username or password"
DUPLICATE_EMAIL = "Email already exists"


def _require(fields, names):
    errors = [
        {"field": name, "message": f"{name} is required"}
        for name in names
        if not isinstance(fields.get(name), str) or not fields[name].strip()
    ]
    if errors:
        raise ValidationFailure("Validation failed", errors=errors)


class UserService:
    """Signup and login over the users store."""

    def __init__(self, store, jwt_secret, token_ttl=timedelta(hours=1)):
        self.store = store
        self.jwt_secret = jwt_secret
        self.token_ttl = token_ttl

    def signup(self, username, email, password):
        """Create a user and return its id. Raises DuplicateEmail if the email is taken."""
        fields = {"username": username, "email": email, "password": password}
        _require(fields, ("username", "email", "password"))
        email = email.strip()

        if self.store.find_one(email=email):
            logger.warning("Signup rejected, email already registered")
            raise DuplicateEmail(DUPLICATE_EMAIL)

        user = User(username=username.strip(), email=email, password=hash_password(password))
        try:
            user_id = self.store.insert(user.to_dict())
        except DuplicateKeyError:
            # Lost the race against a concurrent signup
            logger.warning("Signup rejected by unique index")
            raise DuplicateEmail(DUPLICATE_EMAIL)

        logger.info("User %s created", user_id)
        return user_id

    def login(self, email, password):
        """Verify credentials and return a signed bearer token."""
        _require({"email": email, "password": password}, ("email", "password"))

        user = self.store.find_one(email=email.strip())
        if not user or not verify_password(password, user.get("password")):
            logger.warning("Failed login attempt")
            raise InvalidCredentials(INVALID_CREDENTIALS)

        token = issue_token(user["_id"], self.jwt_secret, self.token_ttl)
        logger.info("User %s logged in", user["_id"])
        return token
