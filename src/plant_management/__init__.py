"""Plant Management package.

This package is organized by feature modules (supervisors, employees, attendance)
with a thin Flask controller layer on top of service/repository layers.
"""
