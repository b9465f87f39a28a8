import os

DIRECTUS = {
    "url": os.getenv("DIRECTUS_URL", "http://localhost:8055"),
    "token": os.getenv("DIRECTUS_TOKEN"),
    "email": os.getenv("DIRECTUS_EMAIL"),
    "password": os.getenv("DIRECTUS_PASSWORD"),
    "collection": os.getenv("DIRECTUS_COLLECTION", "products"),
}

MEDUSA = {
    "url": os.getenv("MEDUSA_URL", "http://localhost:9000"),
    "api_key": os.getenv("MEDUSA_API_KEY"),
}

WEBHOOK_SECRET = os.getenv("WEBHOOK_SECRET")

# Echo window for the loop guard, process-wide
SYNC_THRESHOLD_MS = int(os.getenv("SYNC_THRESHOLD_MS", 10000))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
