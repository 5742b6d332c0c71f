# Routes package init
"""
Employee API — Routes Package
===============================

Route Inventory:
    - employees.py:  GET/POST /employees, GET/PATCH/PUT/DELETE /employees/{id}
    - health.py:     GET /health

Routes stay thin: extract input, call the service, return the model.
"""
