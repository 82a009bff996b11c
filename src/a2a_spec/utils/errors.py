"""Custom exceptions for A2A parameter validation."""


class InvalidArgumentError(ValueError):
    """Raised when a required parameter is missing or `None`."""

    def __init__(self, param_name: str, message: str | None = None):
        """Initializes the InvalidArgumentError.

        Args:
            param_name: The wire name of the offending parameter.
            message: An optional error message. Defaults to a message naming
                the parameter.
        """
        self.param_name = param_name
        self.message = message or f'{param_name} must not be None'
        super().__init__(self.message)
