"""
Gunicorn configuration for production deployment.
"""
import os

PORT = int(os.environ.get("PORT", 8000))
bind = f"0.0.0.0:{PORT}"
wsgi_app = "core.wsgi:application"

# Requests are independent; each worker thread gets its own DB connection.
workers = int(os.environ.get("WEB_CONCURRENCY", 2))
worker_class = "gthread"
threads = int(os.environ.get("GUNICORN_THREADS", 4))
timeout = 30
graceful_timeout = 30
keepalive = 2

accesslog = "-"
errorlog = "-"
loglevel = os.environ.get("LOG_LEVEL", "info").lower()

proc_name = "rating-catalog"
