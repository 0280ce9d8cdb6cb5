class SearchConfigurationError(ValueError):
    """
    Raised when search options cannot be resolved into a valid configuration,
      e.g. an unrecognized option name, a non-numeric value, or a quantity
      whose unit cannot be converted to the configured search unit.
    """
    def __init__(self, message = "Search options could not be resolved"):
        self.message = message
        super().__init__(self.message)
