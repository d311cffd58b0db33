import os
bind = f"0.0.0.0:{os.getenv('PORT','5000')}"
workers = 2
threads = 4
# pushes upload files sequentially and can run for minutes
timeout = int(os.getenv("GUNICORN_TIMEOUT", "600"))
graceful_timeout = 30
keepalive = 5
loglevel = os.getenv("LOG_LEVEL", "info").lower()
