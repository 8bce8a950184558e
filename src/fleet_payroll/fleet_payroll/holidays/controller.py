from __future__ import annotations

from flask import Flask, request

from ..common.http import ok
from ..common.payloads import parse_bank_holiday
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/bank-holidays/<int:company_id>", methods=["GET"], endpoint="bank_holidays_list")
    def bank_holidays_list(company_id: int):
        holidays = container.holiday_service.list_for_company(company_id)
        return ok([h.to_dict() for h in holidays])

    @app.route("/api/bank-holidays", methods=["POST"], endpoint="bank_holidays_create")
    def bank_holidays_create():
        fields = parse_bank_holiday(request.get_json(silent=True))
        holiday_id = container.holiday_service.add_holiday(**fields)
        return ok({"id": holiday_id}, status=201)

    @app.route("/api/bank-holidays/init-uk/<int:company_id>/<int:year>", methods=["POST"], endpoint="bank_holidays_init_uk")
    def bank_holidays_init_uk(company_id: int, year: int):
        added = container.holiday_service.import_uk_holidays(company_id=company_id, year=year)
        return ok({"added": added})
