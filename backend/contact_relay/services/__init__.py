"""Services Layer: orchestration between core logic and infrastructure."""
