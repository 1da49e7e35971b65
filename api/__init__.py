"""
API package: FastAPI routers for the skill bridge.

- skill: POST /api/alexa, receives assistant directives and answers them
- health: GET /health, liveness check
"""
