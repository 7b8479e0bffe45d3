"""
Comments attached to posts.
"""
