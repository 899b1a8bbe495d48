import os

bind = f"0.0.0.0:{os.getenv('PORT', '8080')}"
worker_class = "uvicorn.workers.UvicornWorker"
workers = int(os.getenv("WORKERS", "2"))

# Large uploads stream for a long time; keep workers alive while they do
timeout = int(os.getenv("WORKER_TIMEOUT", "1800"))
graceful_timeout = 120
keepalive = 75

# Recycle workers after N requests
max_requests = int(os.getenv("MAX_REQUESTS", "1000"))
max_requests_jitter = int(os.getenv("MAX_REQUESTS_JITTER", "100"))

accesslog = "-"
errorlog = "-"
loglevel = os.getenv("LOG_LEVEL", "info").lower()

wsgi_app = "app.main:app"
