#!/usr/bin/env python3
"""Development server runner for Caravan."""

import uvicorn

if __name__ == "__main__":
    uvicorn.run(
        "caravan.server.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,  # Auto-reload on code changes
        log_level="info",
    )
