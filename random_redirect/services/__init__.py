"""
Services module for business logic separation.

The sanitizer and selector are pure functions; the remaining services
wrap a database session and are created per request.
"""
