#!/usr/bin/env python
"""Script to run the Task Tracker API server."""
import os
from pathlib import Path

import uvicorn

# Run from the repository root so the default sqlite path lands here
os.chdir(Path(__file__).resolve().parent)

if __name__ == "__main__":
    uvicorn.run(
        "task_service.main:app",
        host=os.getenv("API_HOST", "0.0.0.0"),
        port=int(os.getenv("API_PORT", "8000")),
        reload=True
    )
