"""Custom exceptions for the authoring context."""

from typing import Iterable, Optional


class UnknownSkillBucketError(ValueError):
    """
    Exception raised when a skill operation names a bucket that does not exist.

    Attributes:
        message: Error description
        bucket: The bucket name that was requested
    """

    def __init__(self, bucket: str, valid_buckets: Optional[Iterable[str]] = None):
        self.bucket = bucket
        self.message = f"Unknown skill bucket: {bucket!r}"

        parts = [self.message]
        if valid_buckets:
            parts.append(f"Expected one of: {', '.join(valid_buckets)}")

        super().__init__("\n".join(parts))


class ProjectNotFoundError(KeyError):
    """
    Exception raised when no project carries the requested id.

    Attributes:
        project_id: The id that was looked up
    """

    def __init__(self, project_id: str):
        self.project_id = project_id
        super().__init__(f"No project with id {project_id!r}")

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the message readable
        return self.args[0]


class DuplicateProjectIdError(ValueError):
    """Exception raised when a project is added with an id that is already in use."""

    def __init__(self, project_id: str):
        self.project_id = project_id
        super().__init__(f"Project id already in use: {project_id!r}")
