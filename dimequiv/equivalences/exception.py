# ======================================================================

class NoRelationError(ValueError):
    """
    This exception is raised when an equivalence does not relate the
    dimensions of a requested conversion, e.g. asking ``MassEnergy()``
    to convert a length into a time.

    Attributes
    ----------
    equivalence : Equivalence
        The equivalence instance that was used.
    from_dim, to_dim : Dimension
        Source and target dimensions of the conversion.
    """

    def __init__(self, equivalence, from_dim, to_dim, *,
                 details: str = None, **kwargs):
        """
        Parameters
        ----------
        equivalence, from_dim, to_dim :
            Stored as attributes of the same name.
        details : str, default = None
            Additional text relating to the specific failure.
        kwargs :
            Additional attributes can be added to the object using
            keyword arguments.
        """
        super().__init__(f"{equivalence!r} defines no equivalence "
                         f"between dimensions {from_dim} and {to_dim}.")
        self.equivalence = equivalence
        self.from_dim, self.to_dim = from_dim, to_dim
        self.details = details
        for k, v in kwargs.items():
            setattr(self, k, v)

    def __str__(self):
        """Add additional details below the main failure notice."""
        error_str = super().__str__()
        if self.details is not None:
            error_str += f"\ndetails -> {self.details}"
        return error_str


class AmbiguousRelationError(NoRelationError):
    """
    Raised when more than one conversion rule matches a conversion and
    none of them is more specific than all the others.  The competing
    rules are available as attribute `candidates`.
    """
    pass


class RegistrationError(ValueError):
    """
    Raised when an equivalence relation or rule cannot be registered,
    e.g. a badly formed relation string, an unknown dimension name or tag
    or a rule that is already defined.  Nothing is registered when this
    is raised.
    """

    def __init__(self, *args, relation=None):
        super().__init__(*args)
        self.relation = relation


class CapabilityMismatchError(TypeError):
    """
    Raised when an object that is not an `Equivalence` instance is
    passed where an equivalence is required.  A common cause is passing
    the equivalence class itself, e.g. ``MassEnergy`` instead of
    ``MassEnergy()``.
    """
    pass
