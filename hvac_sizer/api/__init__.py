"""
API Layer Package

FastAPI presentation layer: routers, request/response schemas and
dependency wiring. Application entry point: hvac_sizer.api.main:app
"""
