SECRET_KEY = "test-secret"

GATEWAY_CONFIG = {
    "mode": "memory",
    "base_url": "http://testserver/api",
    "timeout": 1.0,
    "seed_path": None,
}

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"
