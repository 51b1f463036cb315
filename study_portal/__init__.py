"""
Study Portal
Web front end of the student course platform; every screen talks to the REST backend.
"""
__version__ = '0.1.0'
