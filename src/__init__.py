"""Contact Directory Service Package."""

__version__ = "1.0.0"
__author__ = "Bharat kumar"
__description__ = (
    "Serverless contact directory with photo storage using AWS Lambda and DynamoDB"
)

__all__ = ["handlers", "core"]
