"""
User management screen backed by a remote REST user API
"""
