from flask import Blueprint, jsonify, request

from controllers.helpers import error_response, request_fields
from models.employee import Employee
from utils.auth import token_required


def create_employee_blueprint(employee_service, uploads, protected=True):
    employee_bp = Blueprint("employee", __name__, url_prefix="/api/v1/emp")

    if protected:
        check_token = token_required(lambda: None)

        # Every employee route needs a bearer token from /api/v1/user/login
        @employee_bp.before_request
        def require_token():
            if request.method == "OPTIONS":
                return None
            return check_token()

    # -------------------------------------------------------------
    # SEARCH EMPLOYEES
    # -------------------------------------------------------------
    @employee_bp.route("/employees/search", methods=["GET"])
    def search_employees():
        try:
            results = employee_service.search(
                department=request.args.get("department"),
                position=request.args.get("position"),
            )
            return jsonify([Employee.serialize(e) for e in results]), 200
        except Exception as e:
            return error_response(e)

    # -------------------------------------------------------------
    # VIEW EMPLOYEES
    # -------------------------------------------------------------
    @employee_bp.route("/employees", methods=["GET"])
    def get_all_employees():
        try:
            employees = employee_service.list()
            return jsonify([Employee.serialize(e) for e in employees]), 200
        except Exception as e:
            return error_response(e)

    @employee_bp.route("/employees/<eid>", methods=["GET"])
    def get_employee(eid):
        try:
            employee = employee_service.get_by_id(eid)
            return jsonify(Employee.serialize(employee)), 200
        except Exception as e:
            return error_response(e)

    # -------------------------------------------------------------
    # ADD EMPLOYEE
    # -------------------------------------------------------------
    @employee_bp.route("/employees", methods=["POST"])
    def create_employee():
        try:
            employee_id, image_path = employee_service.create(
                request_fields(), uploads.get_upload(request.files)
            )
            body = {
                "message": "Employee created successfully.",
                "employee_id": str(employee_id),
            }
            if image_path:
                body["profileImageUrl"] = image_path
            return jsonify(body), 201
        except Exception as e:
            return error_response(e)

    # -------------------------------------------------------------
    # UPDATE EMPLOYEE
    # -------------------------------------------------------------
    @employee_bp.route("/employees/<eid>", methods=["PUT"])
    def update_employee(eid):
        try:
            employee_service.update(eid, request_fields(), uploads.get_upload(request.files))
            return jsonify({"message": "Employee updated successfully."}), 200
        except Exception as e:
            return error_response(e)

    # -------------------------------------------------------------
    # DELETE EMPLOYEE
    # -------------------------------------------------------------
    @employee_bp.route("/employees/<eid>", methods=["DELETE"])
    def delete_employee(eid):
        try:
            employee_service.delete(eid)
            return jsonify({"message": "Employee deleted successfully."}), 200
        except Exception as e:
            return error_response(e)

    return employee_bp
