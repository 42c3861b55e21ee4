"""API request models."""

from pydantic import BaseModel, Field


class BundleRequest(BaseModel):
    """A configuration bundle submitted for validation or suggestions."""

    files: dict[str, str] = Field(
        ...,
        description="File name → full file content",
        examples=[
            {
                "main.tf": (
                    'resource "aws_instance" "example" {\n'
                    '  ami           = "ami-12345678"\n'
                    '  instance_type = "t2.micro"\n'
                    "}\n"
                )
            }
        ],
    )
