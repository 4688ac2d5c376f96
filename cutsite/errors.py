"""Exceptions raised by the cutsite package."""

from strandutils.errors import ValidationError


class UnknownEnzymeError(ValidationError, KeyError):
    """An enzyme name was not found in the supplied lookup."""

    def __str__(self):
        # KeyError would repr() the message
        return ValueError.__str__(self)
