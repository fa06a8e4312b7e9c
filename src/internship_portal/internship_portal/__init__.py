"""Internship Portal package.

This package is organized by feature modules (interns, leaves, attendance, ...)
with a thin Flask controller layer and service/repository layers underneath.
"""
