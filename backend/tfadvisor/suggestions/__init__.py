"""Improvement suggestions — scaffolds and remediation notes derived from findings."""

from tfadvisor.suggestions.synthesizer import ImprovementSynthesizer

__all__ = ["ImprovementSynthesizer"]
