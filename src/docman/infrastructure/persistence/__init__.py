"""Bibliography persistence adapters."""
