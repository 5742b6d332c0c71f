# Middleware package init
"""
Employee API — Middleware Package
===================================

Middleware Chain (order matters!):
    Request → [Request ID] → [Logging] → [CORS] → Route Handler

    The request ID is assigned first so the access log line and every log
    entry written while handling the request can carry it.
"""
