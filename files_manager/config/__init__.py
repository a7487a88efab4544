"""Environment-driven configuration for Redis, Celery and the Flask app."""
