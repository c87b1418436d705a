"""
Framework configuration sections.
"""
