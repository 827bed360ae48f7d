"""
Domain layer: entities, enums and exceptions for statement analysis
"""
