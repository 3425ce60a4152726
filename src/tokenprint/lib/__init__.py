"""
# tokenprint Core Library

Token records plus the logging infrastructure the report and the CLI
depend on.
"""
