"""
Version 1 of the ToDo List API.
"""
