from .config import MAX_BATCH_WRITES

def add_documents_batch(db, collection_name, records, label_field='model'):
    """
    Writes all records to a collection in ONE batch, each under a new
    auto-generated document ID. Either every record lands or none does,
    so the list is never split across several commits.
    Returns the new document IDs in record order.
    """
    if len(records) > MAX_BATCH_WRITES:
        raise ValueError(
            f"{len(records)} records exceed the Firestore batch limit of {MAX_BATCH_WRITES}"
        )

    if not records:
        return []

    coll_ref = db.collection(collection_name)
    batch = db.batch()
    doc_ids = []

    for record in records:
        doc_ref = coll_ref.document()
        batch.set(doc_ref, record)
        doc_ids.append(doc_ref.id)
        print(f"Added car: {record[label_field]}", flush=True)

    batch.commit()

    return doc_ids
