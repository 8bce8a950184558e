from __future__ import annotations

from flask import Flask, request

from ..common.http import ok
from ..common.payloads import parse_report_request, parse_shift
from ..container import Container
from ..core.exceptions import NotFoundError


def register(app: Flask, container: Container) -> None:
    @app.route("/api/wages/calculate", methods=["POST"], endpoint="wages_calculate")
    def wages_calculate():
        shift = parse_shift(request.get_json(silent=True))
        return ok(container.wage_service.calculate_shift(shift).to_dict())

    @app.route("/api/wages/calculate/<int:timesheet_id>", methods=["POST"], endpoint="wages_calculate_timesheet")
    def wages_calculate_timesheet(timesheet_id: int):
        shift = container.shifts_repo.get_by_id(timesheet_id)
        if not shift:
            raise NotFoundError(f"Timesheet {timesheet_id} not found")
        return ok(container.wage_service.calculate_shift(shift).to_dict())

    @app.route("/api/wages/report", methods=["POST"], endpoint="wages_report")
    def wages_report():
        company_id, start, end = parse_report_request(request.get_json(silent=True))
        report = container.wage_report_service.build_wage_report(company_id=company_id, start=start, end=end)
        return ok(
            {"rows": report.rows, "summary": report.summary, "failures": report.failures},
            skippedOpen=report.skipped_open,
        )
