"""
Celery Configuration

Configures the Celery producer with a Redis broker and task routing.
Workers for these tasks run outside this service.
"""

import os

from celery import Celery
from kombu import Queue


class CeleryConfig:
    """Celery configuration settings."""

    # Broker settings
    broker_url = os.getenv("CELERY_BROKER_URL", "redis://localhost:6379/2")
    result_backend = None
    task_ignore_result = True

    # Task settings
    task_serializer = "json"
    accept_content = ["json"]
    timezone = "UTC"
    enable_utc = True

    # At-least-once delivery: workers acknowledge after running the task
    task_acks_late = True
    task_reject_on_worker_lost = True
    worker_prefetch_multiplier = 1

    # Keep publishing from hanging a request when the broker is down
    broker_connection_timeout = float(os.getenv("CELERY_BROKER_CONNECTION_TIMEOUT", 4.0))
    broker_transport_options = {"max_retries": 1}

    # Task routing
    task_routes = {
        "thumbnails.generate": {"queue": "thumbnail_queue"},
        "users.send_welcome_email": {"queue": "email_queue"},
    }

    # Queue definitions
    task_default_queue = "default"
    task_queues = (
        Queue("default", routing_key="default"),
        Queue("thumbnail_queue", routing_key="thumbnail"),
        Queue("email_queue", routing_key="email"),
    )


def make_celery(app) -> Celery:
    """
    Create the Celery producer bound to a Flask app.

    Args:
        app: Flask application instance

    Returns:
        Configured Celery instance
    """
    celery = Celery(app.import_name, broker=CeleryConfig.broker_url)
    celery.config_from_object(CeleryConfig)
    return celery
