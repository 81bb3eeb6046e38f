"""
Main entry point - imports from user_admin.main
This file is the entry point for uvicorn
"""

import uvicorn
from user_admin.core.config import settings
from user_admin.main import app

if __name__ == "__main__":
    uvicorn.run(app, host=settings.FASTAPI_HOST, port=settings.FASTAPI_PORT)
