class InvalidArgument(ValueError):
    """A non-physical input (mass or distance) was passed to the physics model."""
