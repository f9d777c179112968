"""healthcheck/ -- Client-side liveness exerciser for the auth service.

Layer rule: healthcheck/ talks to the service over HTTP only. It may import
auth/models.py for the shared StatusCode enum, never auth stores or api/.
"""
