"""Stub users API - FastAPI stand-in for the remote service."""
