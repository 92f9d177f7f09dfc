"""
Roster Backend — Pydantic Request/Response Schemas
====================================================

What:  The API contract between clients and the backend.
How:   FastAPI validates request bodies against these models, serializes
       responses through them and generates the OpenAPI document from them.

JSON field names are camelCase on the wire (identityNumber, departmentId, ...)
and snake_case in Python; every model accepts either spelling on input.
"""
