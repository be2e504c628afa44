"""
Name: ASGI Entrypoint (users_api.main)

Responsibilities:
  - Re-export the FastAPI app for ASGI servers, the serverless adapter and tests
  - Keep this module side-effect free beyond importing users_api.api.main

Notes/Constraints:
  - uvicorn users_api.main:app
  - Changing this path breaks function_app.py and deployment scripts
"""

from users_api.api.main import app

__all__ = ["app"]
