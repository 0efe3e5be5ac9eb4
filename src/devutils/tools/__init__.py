"""Conversion tools: JSON formatter and timestamp converter.

Pure parse/render functions raise ``ParseError`` / ``RangeError``; the
service classes catch them at their boundary and record accepted inputs
in a history ledger.
"""
