"""Infrastructure layer — concrete implementations of domain ports.

Sub-packages:
- fetchers/     — MetadataFetcherPort over HTTP (requests)
- persistence/  — JSON bibliography loading
"""
