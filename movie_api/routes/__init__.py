# Routes package init
"""
Movie API — API Routes Package
===============================

What:  HTTP route handlers that accept requests and return responses.

Route Inventory:
    - root.py:    GET    /                  (welcome banner)
    - movies.py:  GET    /movies            (list movies)
                  POST   /movies            (create movie)
                  GET    /movies/{id}       (get one movie)
                  PUT    /movies/{id}       (replace movie)
                  PATCH  /movies/{id}       (merge into movie)
                  DELETE /movies/{id}       (delete movie)
    - health.py:  GET    /health            (service health check)

Design Principle:
    Routes are THIN. They receive validated input, call the MovieService,
    and pick the status code. Store rules live in services/.
"""
