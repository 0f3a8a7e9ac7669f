"""Attendance Dashboard package.

Organized by feature modules (users, attendance, tasks, employees, reports)
with a thin Flask controller layer over service/repository layers. All data
lives behind a remote spreadsheet endpoint reached through ``api.client``.
"""
