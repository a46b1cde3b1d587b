"""Exceptions related to log destinations."""


class LogDestinationError(RuntimeError):
    """
    Exception raised when a log destination cannot be established.

    The log core treats this as unrecoverable and terminates the process.

    Attributes:
        destination (str): Description of the destination that failed.
    """

    def __init__(self, destination: str, reason: str):
        """
        Initializes the LogDestinationError.

        Args:
            destination (str): Description of the destination that failed.
            reason (str): Why it could not be established.
        """
        super().__init__(f"Unable to open log destination {destination}: {reason}")
        self.destination = destination
