"""
Start the Book Catalog API server for local development.

Responsibility: Development launcher
"""

import sys
import os

# Add project root to Python path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import uvicorn
from src.config import settings


if __name__ == "__main__":
    print("🚀 Starting Book Catalog API Server...")
    print(f"📍 GraphQL endpoint: http://localhost:{settings.app.api_port}/graphql")
    print(f"❤️  Health check at: http://localhost:{settings.app.api_port}/health")
    print("\nPress CTRL+C to stop\n")
    
    uvicorn.run(
        "api.main:app",
        host=settings.app.api_host,
        port=settings.app.api_port,
        reload=True,
        log_level=settings.app.log_level.lower()
    )
