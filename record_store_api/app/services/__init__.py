"""
Service layer abstraction.

Each service encapsulates the business logic for a domain.  API
handlers talk to services only, so the in-memory collection used here
could be swapped for another backend without touching the routes.
"""
