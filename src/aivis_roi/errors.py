"""Error types raised by the projection engine."""


class InvalidInputError(ValueError):
    """Inputs pass field validation but sit on a singularity of the model.

    Examples: the anchored curve is undefined when current visibility is the
    root of the raw linear function, and the baseline is undefined for a
    zero conversion rate.
    """
