# Services package init
"""
Movie API — Services Layer
===========================

What:  Business logic layer sitting between routes (HTTP) and the data.
How:   Services accept validated payloads, apply the store rules, and return
       records. They're injected into routes via FastAPI's dependency injection.

Service Inventory:
    - MovieService: In-memory movie store (list, get, create, update, delete)
"""
