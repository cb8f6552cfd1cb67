from __future__ import annotations

from flask import Flask, jsonify

from ..common.web import admin_required
from ..container import Container
from .service import CsvExport


def register(app: Flask, container: Container) -> None:
    def _csv_response(export: CsvExport):
        return app.response_class(
            export.content.encode("utf-8-sig"),
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={export.filename}"},
        )

    @app.route("/api/admin/records", methods=["GET"], endpoint="admin_records")
    @admin_required
    def admin_records():
        rows = container.attendance_service.all_records()
        return jsonify({"success": True, "records": [r.to_dict() for r in rows]}), 200

    @app.route("/api/admin/stats", methods=["GET"], endpoint="admin_stats")
    @admin_required
    def admin_stats():
        stats = container.attendance_service.today_stats()
        return jsonify(
            {
                "success": True,
                "scans_today": stats.scans_today,
                "active_staff_today": stats.active_staff_today,
                "roster_size": stats.roster_size,
            }
        ), 200

    @app.route("/api/admin/summary", methods=["GET"], endpoint="admin_summary")
    @admin_required
    def admin_summary():
        rows = container.report_service.monthly_summary()
        return jsonify({"success": True, "summary": [r.to_dict() for r in rows]}), 200

    @app.route("/api/admin/export/detailed", methods=["GET"], endpoint="export_detailed")
    @admin_required
    def export_detailed():
        return _csv_response(container.report_service.export_detailed())

    @app.route("/api/admin/export/summary", methods=["GET"], endpoint="export_summary")
    @admin_required
    def export_summary():
        return _csv_response(container.report_service.export_summary())
