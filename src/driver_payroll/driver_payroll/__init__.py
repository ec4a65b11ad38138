"""Driver Payroll package.

This package is organized by feature modules (overtime, drivers, rates, payroll)
with a thin Flask controller layer and service/repository layers. The overtime
engine in ``overtime`` is pure and usable without Flask or a database.
"""
