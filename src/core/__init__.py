"""
Core domain models, arithmetic primitives, and error types.

This module contains the building blocks of the calculator pipeline that are
independent of how the calculator is exposed (CLI, HTTP, etc.).
"""
