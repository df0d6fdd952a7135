class StoreError(Exception):
    """Raised by repository adapters when the member store fails a query or update."""
