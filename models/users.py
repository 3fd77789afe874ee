from datetime import datetime, timezone


class User:

    def __init__(self, username, email, password, created_at=None, updated_at=None):
        self.username = username
        self.email = email
        # Already hashed by the caller, never plaintext
        self.password = password
        now = datetime.now(timezone.utc)
        self.created_at = created_at or now
        self.updated_at = updated_at or now

    # Convert to dictionary for MongoDB
    def to_dict(self):
        return {
            "username": self.username,
            "email": self.email,
            "password": self.password,
            "created_at": self.created_at,
            "updated_at": self.updated_at
        }
