

class InvalidArgument(ValueError):
    """ Raised when an argument is malformed, e.g., a non-positive layer
    size or an empty training set with a nonzero number of steps
    """


class DimensionMismatch(ValueError):
    """ Raised when an input, target, or weight array does not match the
    layer sizes the network was constructed with
    """
