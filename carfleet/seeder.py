import sys
from .config import get_db, SERVICE_ACCOUNT_KEY, COLLECTION_NAME
from .cars import get_cars
from .storage import add_documents_batch

def add_cars_to_firestore(key_path=SERVICE_ACCOUNT_KEY, cars=None):
    """
    Seeds the cars collection with the sample fleet.
    Every run adds new documents; nothing is deduplicated.
    Returns the created document IDs, or None if anything failed.
    """
    if cars is None:
        cars = get_cars()

    try:
        print("Adding cars to Firestore...", flush=True)

        db = get_db(key_path)
        doc_ids = add_documents_batch(db, COLLECTION_NAME, cars)

        print("All cars added successfully!", flush=True)
        return doc_ids
    except Exception as e:
        print(f"Error adding cars to Firestore: {e}", file=sys.stderr, flush=True)
        return None
