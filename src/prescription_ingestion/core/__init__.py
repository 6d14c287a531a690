"""
Core pipeline: upload -> text -> cascade -> record.
"""

from .pipeline import PrescriptionPipeline, analyze

__all__ = ["PrescriptionPipeline", "analyze"]
