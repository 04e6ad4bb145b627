"""Student Attendance package.

This package is organized by feature modules (roster, reports)
with thin entry scripts on top and service/repository layers underneath.
"""
