"""Service identity reported by the health probe and the OpenAPI document."""

SERVICE_NAME = "users-api"
VERSION = "1.0.0"
