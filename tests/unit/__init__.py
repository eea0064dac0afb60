"""Unit tests.

Scope
- One module/class/function at a time; no network, no real web server.
- Flask apps used here are built inline and driven through the test client.
"""
