from __future__ import annotations


class RepoInitError(Exception):
    """Base exception class for all repoinit-specific errors.

    Every error raised by the initializer, the process runner, or the
    configuration layer inherits from this class, so callers can catch
    repoinit failures at a CLI boundary while letting system exceptions
    propagate naturally.

    Attributes:
        message: Human-readable error message describing what went wrong.

    Example:
        ```python
        try:
            init_repository(VcsKind.MERCURIAL, path, cwd)
        except RepoInitError as e:
            logger.error("init_failed", error=e.message)
            sys.exit(1)
        ```
    """

    def __init__(self, message: str) -> None:
        """Initialize the RepoInitError.

        Args:
            message: Human-readable error message.
        """
        self.message = message
        super().__init__(message)
