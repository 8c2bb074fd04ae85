"""Id generation for documents and chunks. Deterministic where required."""

import hashlib
import uuid


def generate_chunk_id(document_id: str, chunk_index: int, chunk_hash: str) -> str:
    """Generate a deterministic chunk_id from document, index and hash."""
    payload = f"{document_id}:{chunk_index}:{chunk_hash}"
    digest = hashlib.sha256(payload.encode("utf-8")).hexdigest()[:24]
    return f"chunk_{digest}"


def generate_uuid_prefix(prefix: str) -> str:
    """Generate a unique id with prefix, e.g. doc_<uuid>."""
    return f"{prefix}_{uuid.uuid4().hex[:24]}"


def generate_document_id() -> str:
    """Generate a document_id for content submitted without one."""
    return generate_uuid_prefix("doc")
