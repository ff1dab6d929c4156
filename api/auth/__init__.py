"""
API-key gate shared by every route.
"""
