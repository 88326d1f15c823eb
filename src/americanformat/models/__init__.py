"""Data models for American Format."""
