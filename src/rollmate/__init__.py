"""RollMate package.

This package is organized by feature modules (users, classes, attendance, ...)
with a thin Flask controller layer over service and repository layers backed
by an in-memory store.
"""
