"""File Query Service Package."""

__version__ = "1.0.0"
__description__ = (
    "File-name query terms and a serverless file matching API on AWS Lambda"
)

__all__ = ["handlers", "core"]
