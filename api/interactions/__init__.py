"""
Likes and dislikes recorded against posts.
"""
