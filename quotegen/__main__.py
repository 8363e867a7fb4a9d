"""
Purpose:
- `python -m quotegen` runs the app with the host/port from settings.
"""

import uvicorn
from .core.settings import settings

if __name__ == "__main__":
    uvicorn.run("quotegen.main:app", host=settings.host, port=settings.port)
