import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

GATEWAY_CONFIG = {
    "mode": os.getenv("GATEWAY_MODE", "http"),
    "base_url": os.getenv("API_BASE_URL", "http://localhost:8080/api"),
    "timeout": float(os.getenv("API_TIMEOUT", "10")),
    "seed_path": os.getenv("SEED_PATH") or None,
}

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
