from __future__ import annotations

from datetime import date
from typing import Optional

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_iso_date
from ..core.constants import DEFAULT_PAGE_SIZE
from ..core.exceptions import ValidationError
from ..container import Container
from ..reports.service import write_detail_csv
from .service import AttendanceQuery, paginate


def register(app: Flask, container: Container) -> None:
    def _parse_date(value: Optional[str], field_name: str) -> Optional[date]:
        if not value:
            return None
        try:
            return parse_iso_date(value)
        except ValueError:
            raise ValidationError(f"{field_name} must be YYYY-MM-DD") from None

    def _parse_int(value: Optional[str], field_name: str, default: int) -> int:
        if value is None or value == "":
            return default
        try:
            return int(value)
        except ValueError:
            raise ValidationError(f"{field_name} must be an integer") from None

    def _query_from_args() -> AttendanceQuery:
        return AttendanceQuery(
            start=_parse_date(request.args.get("startDate"), "startDate"),
            end=_parse_date(request.args.get("endDate"), "endDate"),
            departments=tuple(d for d in request.args.getlist("department") if d),
            shift=request.args.get("shift") or None,
            search=request.args.get("search") or None,
        )

    def _error(message: str, status: int):
        return jsonify({"success": False, "error": message}), status

    @app.route("/api/attendance-details", methods=["GET"], endpoint="attendance_details")
    def attendance_details():
        try:
            query = _query_from_args()
            page = _parse_int(request.args.get("page"), "page", 1)
            limit = _parse_int(request.args.get("limit"), "limit", DEFAULT_PAGE_SIZE)

            rows = container.attendance_service.get_detail_rows(query)
            result = paginate(rows, page=page, limit=limit)
            return jsonify({"data": [r.to_dict() for r in result.items], "pagination": result.pagination()})
        except ValidationError as e:
            return _error(str(e), 400)
        except Exception:
            app.logger.exception("Error fetching attendance details")
            return _error("Failed to fetch attendance data", 500)

    @app.route("/api/attendance-details.csv", methods=["GET"], endpoint="attendance_details_csv")
    def attendance_details_csv():
        try:
            query = _query_from_args()
            rows = container.attendance_service.get_detail_rows(query)
        except ValidationError as e:
            return _error(str(e), 400)
        except Exception:
            app.logger.exception("Error exporting attendance details")
            return _error("Failed to export attendance data", 500)

        filename = f"attendance_{query.start.strftime('%Y%m%d')}_{query.end.strftime('%Y%m%d')}.csv"
        return app.response_class(
            write_detail_csv(rows),
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )

    @app.route("/api/stats", methods=["GET"], endpoint="attendance_stats")
    def attendance_stats():
        try:
            rows = container.attendance_service.get_detail_rows(_query_from_args())
            stats = container.stats_service.build_stats(rows)
            return jsonify(stats.to_dict())
        except ValidationError as e:
            return _error(str(e), 400)
        except Exception:
            app.logger.exception("Error fetching attendance stats")
            return _error("Failed to fetch attendance statistics", 500)
