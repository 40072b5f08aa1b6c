"""
auth — account registration and authentication.

Provides:
  • Signup validation (``auth.validation``)
  • Password hashing with bcrypt (``auth.password``)
  • Local and bearer authentication strategies (``auth.strategies``)
  • JWT issuance & verification (``auth.tokens``)
  • ``AuthService`` with ``register`` / ``login`` (``auth.service``)
"""
