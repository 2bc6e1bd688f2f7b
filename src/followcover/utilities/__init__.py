"""
followcover.utilities - Shared helpers
"""
