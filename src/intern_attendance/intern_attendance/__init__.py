"""Intern Attendance package.

Organized by feature modules (interns, attendance, selection, forms, ...)
with plain service/state classes and an explicit wiring container.
"""
