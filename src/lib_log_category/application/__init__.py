"""Application layer: ports and configuration resolution."""
