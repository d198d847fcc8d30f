"""Hours Ledger package.

Tracks member check-ins against a weekly hour requirement stored in a
spreadsheet-like table. Organized by feature modules (attendance, weeks,
timeouts, missed, admin) over a thin Flask controller layer and
service/repository layers.
"""
