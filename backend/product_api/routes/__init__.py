# Routes package init
"""
Product API: API Routes Package
=================================

What:  HTTP route handlers that accept requests and return responses.

Route Inventory:
    - root.py:      GET    /                       (welcome text)
    - products.py:  GET    /api/products           (list products)
                    GET    /api/products/{id}      (get one product)
                    POST   /api/products           (create product)
                    PUT    /api/products/{id}      (update product)
                    DELETE /api/products/{id}      (delete product)
    - health.py:    GET    /health                 (service health check)

Routes stay thin: pull data out of the request, call ProductService,
return the result. Failures are raised, not returned.
"""
