"""HR management record-store API.

This package is organized by feature modules (users, attendance, leaves,
payroll, files, announcements) with a thin Flask controller layer over
service and repository layers backed by a pluggable key-value store.
"""
