"""Fleet Payroll package.

Wage engine for driver timesheets, organized by feature modules (rates,
holidays, shifts, wages, ...) with a thin Flask controller layer on top of
plain service/repository layers.
"""
