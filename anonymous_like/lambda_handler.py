"""AWS Lambda handler for API Gateway proxy integration."""

from mangum import Mangum

from .main import app

# The pool lives as long as the execution environment, so lifespan is skipped
handler = Mangum(app, lifespan="off")
