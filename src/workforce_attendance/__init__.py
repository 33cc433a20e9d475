"""Workforce attendance package.

Organized by feature modules (employees, shifts, attendance, reports, ...)
with a thin Flask controller layer over service/repository layers. The
reconciliation engine in ``attendance.reconciler`` is pure and has no I/O.
"""
