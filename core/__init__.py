"""
Framework core components.
"""
