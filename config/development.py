import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

# The in-memory mock is the default so the portal runs without a backend.
GATEWAY_CONFIG = {
    "mode": os.getenv("GATEWAY_MODE", "memory"),
    "base_url": os.getenv("API_BASE_URL", "http://localhost:8080/api"),
    "timeout": float(os.getenv("API_TIMEOUT", "10")),
    "seed_path": os.getenv("SEED_PATH") or None,
}

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
