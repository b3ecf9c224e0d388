"""
auth — User authentication module.

Provides:
  • Signed, expiring session tokens (HMAC-SHA256)
  • Password hashing (bcrypt)
  • Register / Login API routes
  • ``get_current_user_id`` FastAPI dependency
  • The authentication error taxonomy
"""
