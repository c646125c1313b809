#!/usr/bin/env python3
"""
Simple script to run the cooling load calculator backend
"""
import uvicorn
import sys
import os

# Add the backend directory to Python path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from app.config import DEBUG, HOST, PORT

if __name__ == "__main__":
    print("Starting Cooling Load Calculator backend...")
    print(f"Server will be available at: http://localhost:{PORT}")
    print(f"API documentation: http://localhost:{PORT}/docs")
    print("\nPress Ctrl+C to stop the server\n")

    try:
        uvicorn.run(
            "app.main:app",
            host=HOST,
            port=PORT,
            reload=DEBUG,
            log_level="debug" if DEBUG else "info"
        )
    except KeyboardInterrupt:
        print("\nServer stopped")
