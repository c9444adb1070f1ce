"""User API: CRUD service for users with server-computed age."""
