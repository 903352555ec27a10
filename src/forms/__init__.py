"""Form input validation.

Raw values are validated and sanitized into a `ValidationOutcome`, which is the only result shape
callers need to handle.
"""
