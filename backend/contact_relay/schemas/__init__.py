"""Pydantic Schemas: outbound payloads and response bodies at the system boundary."""
