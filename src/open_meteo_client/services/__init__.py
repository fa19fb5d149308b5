"""
Shared infrastructure.

- http.py - pooled ``requests.Session`` with default timeout and headers
"""
