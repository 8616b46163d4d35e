"""Employee Records package.

Feature modules (employees, admins, auth) each keep a thin Flask controller
on top of service and repository layers.
"""
