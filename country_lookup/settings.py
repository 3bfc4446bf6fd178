# country_lookup/settings.py

# Upstream directory service (REST Countries v3.1)
UPSTREAM_BASE_URL = "https://restcountries.com"
UPSTREAM_TIMEOUT_SECONDS = 5.0

# Local listener
HOST = "127.0.0.1"
PORT = 8000

LOG_LEVEL = "INFO"
# threadName: each request runs on its own worker thread
LOG_FORMAT = "%(asctime)s %(levelname)s [%(threadName)s] %(name)s :: %(message)s"
