# Services package init
"""
Product API: Services Layer
=============================

What:  Business logic between routes (HTTP) and the store (state).
How:   Services receive the store per call, apply the product rules, and
       return schema objects or raise application exceptions.

Service Inventory:
    - ProductService: list, get, create, update, delete
"""
