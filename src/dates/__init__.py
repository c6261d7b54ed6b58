"""
Random calendar date generation.

Includes the calendar date helpers (numpy datetime64 based), the validation
error type, the date sampling functions and batch fixture generation.
"""
