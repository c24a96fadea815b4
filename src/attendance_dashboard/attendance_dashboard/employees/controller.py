from __future__ import annotations

from flask import Flask, jsonify, request

from ..core.exceptions import NotFoundError, ValidationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/details", methods=["GET"], endpoint="list_employees")
    def list_employees():
        try:
            employees = container.employee_service.list_employees()
            return jsonify({"success": True, "data": [e.to_dict() for e in employees]})
        except Exception:
            app.logger.exception("Error fetching employees")
            return jsonify({"success": False, "error": "Failed to fetch employees"}), 500

    @app.route("/api/details", methods=["POST"], endpoint="add_employee")
    def add_employee():
        body = request.get_json(silent=True) or {}
        try:
            employee = container.employee_service.add_employee(
                first_name=body.get("first_name", ""),
                last_name=body.get("last_name", ""),
                department=body.get("department", ""),
                shift=body.get("shift"),
            )
            return jsonify({"success": True, "message": "Employee added", "data": employee.to_dict()})
        except ValidationError as e:
            return jsonify({"success": False, "error": str(e)}), 400
        except Exception:
            app.logger.exception("Error adding employee")
            return jsonify({"success": False, "error": "Failed to add employee"}), 500

    @app.route("/api/details/<employee_id>", methods=["DELETE"], endpoint="delete_employee")
    def delete_employee(employee_id: str):
        try:
            container.employee_service.delete_employee(employee_id)
            return jsonify({"success": True, "message": "Employee deleted"})
        except ValidationError as e:
            return jsonify({"success": False, "error": str(e)}), 400
        except NotFoundError as e:
            return jsonify({"success": False, "error": str(e)}), 404
        except Exception:
            app.logger.exception("Error deleting employee")
            return jsonify({"success": False, "error": "Failed to delete employee"}), 500
