"""Pydantic input models for the Yuno tools, one module per resource."""
