"""External-facing services: artifact storage and the policy engine."""
