"""Application layer: configuration, generators and orchestration services."""
