from flask import Blueprint, jsonify

from controllers.helpers import error_response, request_fields


def create_user_blueprint(user_service):
    user_bp = Blueprint("user", __name__, url_prefix="/api/v1/user")

    # -----------------------------
    # SIGNUP
    # -----------------------------
    @user_bp.route("/signup", methods=["POST"])
    def signup():
        try:
            body = request_fields()
            user_id = user_service.signup(
                body.get("username"),
                body.get("email"),
                body.get("password"),
            )
            return jsonify({
                "message": "User created successfully.",
                "user_id": str(user_id),
            }), 201
        except Exception as e:
            return error_response(e)

    # -----------------------------
    # LOGIN
    # -----------------------------
    @user_bp.route("/login", methods=["POST"])
    def login():
        try:
            body = request_fields()
            token = user_service.login(body.get("email"), body.get("password"))
            return jsonify({
                "message": "Login successful.",
                "jwt_token": token,
            }), 200
        except Exception as e:
            return error_response(e)

    return user_bp
