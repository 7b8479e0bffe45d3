"""
Posts: creation, the feed and single-post pages.
"""
