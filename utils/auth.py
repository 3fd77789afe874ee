from functools import wraps

from flask import current_app, g, jsonify, request
from werkzeug.security import check_password_hash, generate_password_hash

from utils.errors import TokenError
from utils.tokens import decode_token


def hash_password(plaintext):
    # Salted per call; the salt and method travel inside the hash string
    return generate_password_hash(plaintext)


def verify_password(plaintext, hashed):
    if not hashed or plaintext is None:
        return False
    return check_password_hash(hashed, plaintext)


def _unauthorized(message):
    return jsonify({"status": False, "message": message}), 401


# This decorator makes sure that only requests with a valid bearer token reach the view
def token_required(view_function):
    @wraps(view_function)
    def decorated_function(*args, **kwargs):
        header = request.headers.get("Authorization", "")
        parts = header.split()
        if len(parts) != 2 or parts[0].lower() != "bearer":
            return _unauthorized("Authorization token is missing")

        try:
            g.user_id = decode_token(parts[1], current_app.config.get("JWT_SECRET"))
        except TokenError as e:
            return _unauthorized(str(e))
        return view_function(*args, **kwargs)
    return decorated_function
