"""
EC2 Hello Service - Main Application
Serves a greeting on / and a health check on /health, port 8080 on all interfaces
"""

from hello_service.web_app import main


if __name__ == "__main__":
    main()
