"""
files_manager

Multi-user file storage service: token sessions, a folder hierarchy of file
records kept in Redis, content on local disk and thumbnail jobs on Celery.
"""

__version__ = "0.1.0"
