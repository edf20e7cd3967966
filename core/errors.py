class ContainerError(Exception):
    """Base class for every failure raised by the container models."""


class OutOfRangeError(ContainerError, IndexError):
    pass


class EmptyContainerError(ContainerError, IndexError):
    pass


class CapacityExceededError(ContainerError, OverflowError):
    pass


class InvalidCapacityError(ContainerError, ValueError):
    pass
