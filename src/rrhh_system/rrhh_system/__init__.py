"""RRHH System package.

This package is organized by feature modules (employees, absences, payroll, ...)
with a thin Flask controller layer and service/repository layers.
"""
