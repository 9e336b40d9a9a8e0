import firebase_admin
from firebase_admin import credentials, firestore
import sys
import os

# --- Configuration Constants ---
SERVICE_ACCOUNT_KEY = 'serviceAccountKey.json'
COLLECTION_NAME = 'cars'
MAX_BATCH_WRITES = 500  # Firestore hard limit per batch

# --- Environment Setup ---
# Force UTF-8 for console output
try:
    sys.stdout.reconfigure(encoding='utf-8')
except (AttributeError, ValueError):
    # stdout replaced by something without reconfigure (e.g. captured in tests)
    pass

# --- Firebase Initialization Singleton ---
_db_client = None

def get_db(key_path=SERVICE_ACCOUNT_KEY):
    """
    Returns the Firestore client, initializing the default Firebase app
    from the service account key on first use.
    Raises instead of exiting so the caller decides how to report failures.
    """
    global _db_client
    if _db_client is None:
        if not firebase_admin._apps:
            if not os.path.exists(key_path):
                raise FileNotFoundError(f"Could not find {key_path}. Please ensure it is in the project root.")

            cred = credentials.Certificate(key_path)
            firebase_admin.initialize_app(cred)

        _db_client = firestore.client()
        print("✅ Connected to Firebase Firestore", flush=True)

    return _db_client

def reset_db():
    """
    Drops the cached client (used by tests and long-lived shells).
    """
    global _db_client
    _db_client = None
