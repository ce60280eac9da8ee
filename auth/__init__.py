"""
auth — User authentication module.

Provides:
  • Password hashing (bcrypt, per-call salt)
  • Signed token issuance & verification (HS256 JWT)
  • Credential store with unique-email inserts
  • Signup / Login API routes
  • ``get_current_identity`` FastAPI dependency
"""
