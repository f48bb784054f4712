"""
Gunicorn configuration for production: gunicorn -c gunicorn.conf.py main:app
"""
from pathlib import Path

from framework.config import settings

LOG_DIR = Path(settings.LOG_DIR)
LOG_DIR.mkdir(parents=True, exist_ok=True)

# Server
bind = "0.0.0.0:8000"
backlog = 2048

# Workers: each one owns its engine and connection pool
workers = 2
worker_class = "uvicorn.workers.UvicornWorker"
max_requests = 1000
max_requests_jitter = 50
timeout = 60
graceful_timeout = 30
keepalive = 5

proc_name = (settings.GUNICORN_PROC_NAME or settings.APP_NAME.lower().replace(" ", "-"))[:32]

# Logging
accesslog = str(LOG_DIR / "gunicorn_access.log")
errorlog = str(LOG_DIR / "gunicorn_error.log")
loglevel = "info"
access_log_format = '%(h)s %(t)s "%(r)s" %(s)s %(b)s %(D)s "%({x-trace-id}o)s"'

pidfile = str(LOG_DIR / "gunicorn.pid")
preload_app = False  # engines must not be shared across forked workers

def when_ready(server):
    server.log.info("%s is ready. Listening on %s", settings.APP_NAME, server.address)

def on_exit(server):
    server.log.info("%s is shutting down.", settings.APP_NAME)

def post_fork(server, worker):
    server.log.info("Worker spawned (pid: %s)", worker.pid)
