"""
Portal-wide routes
"""
