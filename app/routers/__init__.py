"""
Routers module - API endpoint handlers organized by feature.

- auth: Google sign-in callback (POST /auth/callback)
- dev: Redirect debugging aid (GET /auth/callbacks), development only
"""
