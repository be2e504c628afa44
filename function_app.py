"""Azure Functions App - Python v2 Programming Model.

Exposes the Users API (FastAPI/ASGI) as a single HTTP-triggered function.
Every invocation is forwarded to the ASGI app, which routes it to one of the
/users handlers; lifespan startup (pool + migrations) runs once per worker.

host.json sets routePrefix to "" so the public paths stay /users and
/users/{id} (no /api prefix).
"""

import azure.functions as func

from users_api.main import app as fastapi_app

app = func.AsgiFunctionApp(app=fastapi_app, http_auth_level=func.AuthLevel.ANONYMOUS)
