"""Users API: FastAPI service exposing CRUD operations on users."""
