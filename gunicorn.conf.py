"""Gunicorn production configuration."""
import multiprocessing

wsgi_app = "tracker.main:app"
pythonpath = "backend"
bind = "0.0.0.0:3000"
workers = multiprocessing.cpu_count() * 2 + 1
worker_class = "uvicorn.workers.UvicornWorker"
worker_connections = 1000
# Imports run in-process after the response is sent; give them room to drain.
timeout = 120
graceful_timeout = 60
keepalive = 5
max_requests = 1000
max_requests_jitter = 100
preload_app = True
accesslog = "-"
errorlog = "-"
loglevel = "info"
