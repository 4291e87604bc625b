"""Gunicorn config for the Sales Dashboard API."""
import os

# Bind to the platform's PORT or default 8000
bind = f"0.0.0.0:{os.environ.get('PORT', '8000')}"

# The record store lives in process memory and is owned by the app, so a
# single worker keeps filter state consistent between requests.
worker_class = "uvicorn.workers.UvicornWorker"
workers = 1

wsgi_app = "sales_dashboard.main:app"

timeout = 60
graceful_timeout = 30
keepalive = 65

# Logging
accesslog = "-"
errorlog = "-"
loglevel = os.environ.get("SALES_DASHBOARD_LOG_LEVEL", "info").lower()
