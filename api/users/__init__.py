"""
User registration.
"""
