"""
Ride Service: Middleware Package
================================

Cross-cutting concerns applied to every request.

Middleware Chain:
    Request → [Request ID] → [Logging] → Route Handler

    Request ID runs first so the access log line and any error handler can
    read the ID from request_id_var.
"""
