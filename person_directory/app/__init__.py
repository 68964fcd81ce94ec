"""
Application package for the Person Directory Service.

``main`` assembles the FastAPI application, ``core`` holds
configuration, logging and database plumbing, ``schemas`` the
request/response models, ``services`` the SQL statements and ``api``
the HTTP routes.
"""
