"""
AWS Lambda handler — Mangum wrapper for the AdScreen FastAPI app.
"""

from mangum import Mangum

from adscreen.main import app

handler = Mangum(app, lifespan="off")
