"""
Serverless Entry Point

Bridges a Python serverless runtime (Vercel, or AWS Lambda behind a WSGI
adapter) and the Flask application.

Architecture:
- The runtime calls into this module for every request
- Configuration is read once, when the module is first imported
- Each request gets its own scoped database session, released at teardown
"""

from game_backend import create_app

# The name 'app' is detected automatically by @vercel/python
app = create_app()
