#!/usr/bin/env python3
"""
Development server runner for the CV Analysis Backend.
Use this for local development and testing.
"""
import os
import sys


def main():
    # Add the project directory to the path
    project_dir = os.path.dirname(os.path.abspath(__file__))
    sys.path.insert(0, project_dir)
    
    # Import uvicorn
    try:
        import uvicorn
    except ImportError:
        print("Error: uvicorn not installed. Run: pip install uvicorn[standard]")
        sys.exit(1)
    
    from app.config import get_settings

    # CVANALYSIS_* environment variables and .env are read by Settings
    settings = get_settings()
    host = settings.host
    port = settings.port
    debug = settings.debug
    
    print(f"\n🚀 Starting {settings.app_name} v{settings.app_version}")
    print(f"   Host: {host}")
    print(f"   Port: {port}")
    print(f"   Debug: {debug}")
    print(f"\n📚 API Documentation: http://localhost:{port}/docs")
    print(f"📖 ReDoc: http://localhost:{port}/redoc")
    print(f"❤️  Health Check: http://localhost:{port}/api/health\n")
    
    # Run the server
    uvicorn.run(
        "app.main:app",
        host=host,
        port=port,
        reload=debug,
        log_level="debug" if debug else "info",
    )


if __name__ == "__main__":
    main()
