"""Exception shared by strandutils and cutsite."""


class ValidationError(ValueError):
    """Input strands, cut locations or format settings are inconsistent."""
