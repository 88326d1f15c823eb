"""Pairing result models."""

from americanformat.models.pairing.pairing_result import AmericanFormatResult

__all__ = ["AmericanFormatResult"]
