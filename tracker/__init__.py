"""
Issue Tracker - In-memory users, projects and issues
"""

__version__ = "0.1.0"
