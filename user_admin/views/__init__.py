"""
Server-rendered HTML views
"""
