"""
EC2 Hello Service
Minimal HTTP endpoint with a greeting route and a health check
"""

__version__ = "1.0.0"
