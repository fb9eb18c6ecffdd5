"""HR Portal package.

Feature modules (users, attendance, leaves, ...) each follow the same shape:
a thin Flask controller, a service holding the client-side rules, and a
repository talking to the REST backend.
"""
