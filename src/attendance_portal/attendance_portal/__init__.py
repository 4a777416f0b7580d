"""Attendance Portal package.

Feature modules (users, attendance, inventory) sit on top of a swappable
data-access gateway (live HTTP API, in-memory mock or static seed), with a
thin Flask controller layer and service/store layers underneath.
"""
