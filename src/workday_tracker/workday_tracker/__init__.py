"""Workday Tracker package.

Feature modules (employees, clients, workrecords, payroll, ...) are built on
Protocol repositories over a key/value storage collaborator, with a thin Flask
JSON layer on top.
"""
