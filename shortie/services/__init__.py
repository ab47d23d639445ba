"""
Services module for business logic separation.

This module contains the code store, the code generator and the
shortening service, keeping them separate from the API endpoints.
"""
