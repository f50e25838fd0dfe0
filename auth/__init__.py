"""
auth — User authentication module.

Provides:
  • JWT session token creation & verification (python-jose, HS256)
  • Signed ``session`` cookie helpers
  • Password hashing (bcrypt)
  • Register / Login / Logout / Me API routes
  • ``get_current_user_id`` FastAPI dependency
"""
