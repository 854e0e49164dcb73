"""
FastAPI routers grouped by resource (skier, subscription, course...).

Each module exposes an APIRouter included by the main application
(app.py), keeping endpoint definitions close to their use cases.
"""
