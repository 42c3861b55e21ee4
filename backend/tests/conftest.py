"""Shared test fixtures and configuration."""

import pytest

from tfadvisor.validators.engine import ValidationEngine

EXAMPLE_MAIN_TF = (
    'resource "aws_instance" "example" { ami = "ami-12345678"\n'
    ' instance_type = "t2.micro" }'
)

WELL_FORMED_VARIABLES_TF = """\
variable "region" {
  description = "AWS region"
  type        = string
}

variable "instance_type" {
  description = "EC2 instance type"
  type        = string
  default     = "t2.micro"
}
"""

WELL_FORMED_OUTPUTS_TF = """\
output "instance_id" {
  description = "The ID of the instance"
  value       = aws_instance.example.id
}
"""

README = "# Example\n\nLaunches one EC2 instance.\n"

OPEN_SSH_SECURITY_GROUP = """\
resource "aws_security_group" "ssh_access" {
  name = "ssh"

  ingress {
    from_port   = 22
    to_port     = 22
    protocol    = "tcp"
    cidr_blocks = ["0.0.0.0/0"]
  }

  tags = var.tags
}
"""


@pytest.fixture
def engine() -> ValidationEngine:
    return ValidationEngine()


@pytest.fixture
def minimal_bundle() -> dict[str, str]:
    return {"main.tf": EXAMPLE_MAIN_TF}


@pytest.fixture
def complete_bundle() -> dict[str, str]:
    return {
        "main.tf": EXAMPLE_MAIN_TF,
        "variables.tf": WELL_FORMED_VARIABLES_TF,
        "outputs.tf": WELL_FORMED_OUTPUTS_TF,
        "README.md": README,
    }


@pytest.fixture
def open_ssh_bundle(complete_bundle: dict[str, str]) -> dict[str, str]:
    return {**complete_bundle, "security.tf": OPEN_SSH_SECURITY_GROUP}
