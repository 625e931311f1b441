"""
Dashboard pages.
"""
