import os

wsgi_app = "bookstore.wsgi:application"
bind = os.getenv("GUNI_BIND", "0.0.0.0:8000")

# Gateway calls block on network I/O, so each worker runs a thread pool.
workers = int(os.getenv("GUNI_WORKERS", str(min(max(2, (os.cpu_count() or 1) * 2), 8))))
worker_class = "gthread"
threads = int(os.getenv("GTHREADS", "4"))

# HTTP_TIMEOUT_SECS bounds a single gateway call; keep this comfortably above it.
timeout = int(os.getenv("GUNI_TIMEOUT", "60"))
graceful_timeout = int(os.getenv("GUNI_GRACEFUL_TIMEOUT", "30"))
keepalive = int(os.getenv("GUNI_KEEPALIVE", "5"))

preload_app = True
max_requests = int(os.getenv("GUNI_MAX_REQUESTS", "2000"))
max_requests_jitter = int(os.getenv("GUNI_MAX_REQUESTS_JITTER", "200"))

accesslog = "-"
errorlog = "-"
loglevel = os.getenv("GUNI_LOGLEVEL", "info")
