"""Exceptions raised at the sample_lib boundaries."""


class SampleError(Exception):
    """Base class for handwriting sample errors."""


class SampleFormatError(SampleError, ValueError):
    """A drawing or point payload could not be parsed."""
