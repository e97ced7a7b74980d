"""
Worklog API application.
"""
