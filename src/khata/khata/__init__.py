"""Khata payroll package.

Feature modules (employees, attendance, advances, payments, vehicles, payroll,
reports, users) each carry a model, a repository interface with MySQL and
in-memory implementations, a service and a thin Flask controller.
"""
