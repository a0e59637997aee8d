# Services package init
"""
Pets API — Services Layer
===========================

What:  Business logic sitting between routes (HTTP) and repositories (persistence).
Why:   Routes handle HTTP; services handle validation and not-found rules.

Service Inventory:
    - PetService: create / list-by-owner / get-by-id / delete-by-id
"""
