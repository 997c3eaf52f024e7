"""Collection service - CRUD microservice over a Supabase-backed collections table."""

__version__ = "1.0.0"
