"""
Application package for the ToDo List API.

The code is split by layer rather than by domain: ``models`` holds the
entities, ``repositories`` the persistence contracts and their SQLite
implementations, ``services`` the business rules (ownership and
collaborator management), ``schemas`` the request/response payloads
and ``api`` the versioned HTTP routers.

The FastAPI application itself is built by ``main.create_app``; it is
not imported here so that the service layer can be used (and tested)
without constructing an application.
"""
