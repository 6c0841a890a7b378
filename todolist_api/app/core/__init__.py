"""
Cross-cutting infrastructure: settings, logging, database access and
domain exceptions.
"""
