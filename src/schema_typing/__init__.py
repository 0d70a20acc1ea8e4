"""Schema-to-type resolution and example synthesis for OpenAPI/Swagger schemas."""

import logging

logging.getLogger("schema_typing").addHandler(logging.NullHandler())
