# Routes package init
"""
Pets API — API Routes Package
===============================

Route Inventory:
    - pets.py:    POST   /api/pets          (create)
                  GET    /api/pets          (list by ownerEmail)
                  GET    /api/pets/{id}     (get one)
                  DELETE /api/pets/{id}     (delete one)
    - health.py:  GET    /health            (service health check)

Design Principle:
    Routes are THIN — they parse the request, call PetService, and set the
    success status code. Error statuses come from the exception handlers.
"""
