""" Custom exceptions for the configuration data helpers """

class FileLoadException(Exception):
    """Exception raised for errors in loading configuration, translation or package files."""
    def __init__(self, message):
        """
        Initializes the FileLoadException.

        Arguments:
            message: The error message, or a dict with message and traceback detail.
        """
        self.general_message = "Error loading configuration file"
        super().__init__(f"{self.general_message}: {message}")


class InvalidRangeException(Exception):
    """Exception raised when a date range starts after it ends."""
    def __init__(self, message: str):
        """
        Initializes the InvalidRangeException.

        Arguments:
            message: explanation of the error.
        """
        self.general_message = "Invalid date range"
        super().__init__(f"{self.general_message}: {message}")


class UnsupportedGranularityException(Exception):
    """Exception raised when period boundaries cannot be computed for a view range."""
    def __init__(self, message: str):
        """
        Initializes the UnsupportedGranularityException.

        Arguments:
            message: explanation of the error.
        """
        self.general_message = "Unsupported view range"
        super().__init__(f"{self.general_message}: {message}")
