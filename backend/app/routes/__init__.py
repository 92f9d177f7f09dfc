"""
Roster Backend — API Routes Package
=====================================

Route Inventory:
    - auth.py:         POST /v1/auth          (register or log in a manager)
    - departments.py:  POST /v1/department    (create department)
                       GET  /v1/department    (list own departments)
    - employees.py:    POST /v1/employee      (create employee, ownership-checked)
                       GET  /v1/employee      (filtered, paginated list)
    - health.py:       GET  /health           (service health check)

Routes stay thin: read the request, resolve the caller, call a service,
return its result. Business rules live in app/services.
"""
