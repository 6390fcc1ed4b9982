class PackerError(RuntimeError):
    """
    Raised when the text source of a packing job cannot be processed.

    The underlying exception (e.g. a missing file) is chained as __cause__.
    """

    pass
