"""Punch Clock package.

This package is organized by feature modules (employees, punches, timeclock,
permissions, admin, ...) with a thin click-based terminal on top of
file-backed repositories and plain service classes.
"""
