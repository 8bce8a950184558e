from __future__ import annotations

from flask import Flask, request

from ..common.http import ok
from ..common.payloads import parse_driver_override, parse_pay_rate_changes
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/pay-rates/<int:company_id>", methods=["GET"], endpoint="pay_rates_list")
    def pay_rates_list(company_id: int):
        # A company seen for the first time gets its default row here.
        container.pay_rate_service.initialize_default(company_id)
        rates = container.pay_rate_service.list_for_company(company_id)
        return ok([r.to_dict() for r in rates])

    @app.route("/api/pay-rates/driver", methods=["POST"], endpoint="pay_rates_driver_upsert")
    def pay_rates_driver_upsert():
        company_id, driver_id, changes = parse_driver_override(request.get_json(silent=True))
        rate = container.pay_rate_service.set_driver_override(company_id=company_id, driver_id=driver_id, **changes)
        return ok(rate.to_dict())

    @app.route("/api/pay-rates/<int:rate_id>", methods=["PATCH"], endpoint="pay_rates_update")
    def pay_rates_update(rate_id: int):
        changes = parse_pay_rate_changes(request.get_json(silent=True))
        rate = container.pay_rate_service.update_rate(rate_id, changes)
        return ok(rate.to_dict())

    @app.route("/api/pay-rates/driver/<int:driver_id>/<int:company_id>", methods=["DELETE"], endpoint="pay_rates_driver_delete")
    def pay_rates_driver_delete(driver_id: int, company_id: int):
        container.pay_rate_service.delete_driver_override(company_id=company_id, driver_id=driver_id)
        return ok({"message": "Driver pay rate deleted, company default will apply"})
