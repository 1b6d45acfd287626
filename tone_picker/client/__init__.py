from .api import ToneApiClient, classify_error
from .storage import DocumentStore, FileStorage, STORAGE_KEY

__all__ = ["ToneApiClient", "classify_error", "DocumentStore", "FileStorage", "STORAGE_KEY"]
