"""Sample data for demos and evaluation."""

from .generator import SampleDataGenerator

__all__ = ['SampleDataGenerator']
