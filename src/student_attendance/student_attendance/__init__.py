"""Student Attendance package.

This package is organized by feature modules (attendance, sessions, dashboard)
with pure derivation rules at the bottom, small services on top and a thin
Flask controller layer for the presentation client.
"""
