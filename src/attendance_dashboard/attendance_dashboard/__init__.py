"""Attendance Dashboard package.

This package is organized by feature modules (employees, attendance, reports)
with a thin Flask controller layer over service/repository layers. The
attendance core (time arithmetic, status classification, mock data
generation) has no Flask or database dependency.
"""
