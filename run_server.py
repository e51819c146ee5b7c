#!/usr/bin/env python3
"""
Script to run the inventory API server.
"""
import uvicorn
from inventory_app.config import settings


def main():
    uvicorn.run(
        "inventory_app.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
