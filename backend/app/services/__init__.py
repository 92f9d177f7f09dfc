"""
Roster Backend — Services Layer
=================================

What:  Business logic between routes (HTTP) and the database.
How:   Services are stateless singletons; each call receives the request's
       AsyncSession and raises typed errors from app.exceptions.

Service Inventory:
    - employee_query:      Renders the filtered employee listing statement
    - EmployeeService:     Ownership-checked create, manager-scoped list
    - DepartmentService:   Create/list a manager's departments
    - AuthService:         Register and log in managers
"""
