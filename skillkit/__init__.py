"""
Validation, packaging and event hooks for agent skills.
"""
