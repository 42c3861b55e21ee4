"""TF Advisor — Terraform best-practice validation and improvement suggestions."""

__version__ = "1.0.0"
