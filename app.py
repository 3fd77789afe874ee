import logging
import os
from datetime import timedelta

from flask import Flask, jsonify, send_from_directory
from flask_cors import CORS

from config import get_config
from controllers.employee_controller import create_employee_blueprint
from controllers.user_controller import create_user_blueprint
from services import EmployeeService, UserService
from utils.db import ensure_indexes, init_db_connection, init_stores
from utils.uploads import URL_PREFIX, UploadHandler

logger = logging.getLogger(__name__)


def create_app(config_object=None, user_store=None, employee_store=None,
               on_image_superseded=None):
    """
    Build the Flask app. Stores default to the MongoDB collections named by
    MONGO_URI; pass them in to run against something else.
    """
    app = Flask(__name__)                                   # Initialize Flask app
    app.config.from_object(config_object or get_config())   # Load configuration from Config class

    logging.basicConfig(
        level=app.config["LOG_LEVEL"],
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    CORS(app)

    if user_store is None or employee_store is None:
        mongo = init_db_connection(app)                     # Initialize MongoDB connection
        default_users, default_employees = init_stores(mongo)
        if user_store is None:
            user_store = default_users
        if employee_store is None:
            employee_store = default_employees
        ensure_indexes(app, user_store, employee_store)

    upload_folder = os.path.abspath(app.config["UPLOAD_FOLDER"])
    uploads = UploadHandler(upload_folder)

    user_service = UserService(
        user_store,
        app.config.get("JWT_SECRET"),
        timedelta(seconds=app.config["JWT_EXPIRES_SECONDS"]),
    )
    employee_service = EmployeeService(employee_store, uploads, on_image_superseded)

    # Register Blueprint
    app.register_blueprint(create_user_blueprint(user_service))
    app.register_blueprint(create_employee_blueprint(
        employee_service, uploads, protected=app.config["PROTECT_EMPLOYEE_ROUTES"]
    ))

    # Serve uploaded images
    @app.route(f"{URL_PREFIX}/<path:filename>")
    def uploaded_file(filename):
        return send_from_directory(upload_folder, filename)

    @app.route("/")
    def index():
        return jsonify({"message": "Server is running..."})

    @app.route("/health")
    def health_check():
        try:
            employee_store.ping()
        except Exception as e:
            logger.error("Health check failed: %s", e)
            return jsonify({"status": "unhealthy", "message": str(e)}), 503
        return jsonify({"status": "healthy"})

    return app


# Run the app
if __name__ == "__main__":
    application = create_app()
    application.run(host="0.0.0.0", port=application.config["PORT"], debug=application.config["DEBUG"])
