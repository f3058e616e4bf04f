from __future__ import annotations

import re
from typing import Callable, NamedTuple, Optional

from dimequiv.units import Dimension, dimension, named_dimension
from ._base import (Equivalence, EquivalenceFamily, ExtendedEquivalence,
                    as_family)
from .exception import (AmbiguousRelationError, CapabilityMismatchError,
                        NoRelationError, RegistrationError)

__all__ = ['add_rule', 'edconvert', 'eqrelation', 'relations', 'rule']

RuleFunc = Callable[[Dimension, object, Equivalence], object]


# ======================================================================


class Rule(NamedTuple):
    """
    A single registered conversion into dimension `to` from dimension
    `from_` for members of `family`.  Either dimension can be ``None``,
    which matches any dimension.
    """
    to: Optional[Dimension]
    from_: Optional[Dimension]
    family: EquivalenceFamily
    func: RuleFunc

    def key(self) -> tuple:
        return self.to, self.from_, self.family

    def narrower(self, other: Rule) -> bool:
        """
        Returns ``True`` if this rule is at least as specific as `other`
        in every position.
        """
        return (_dim_within(self.to, other.to) and
                _dim_within(self.from_, other.from_) and
                self.family <= other.family)


# Registered rules, grouped by (to, from_) dimension key.
_RULES: dict[tuple[Optional[Dimension], Optional[Dimension]],
             list[Rule]] = {}

# The same rules in order of registration.
_RULE_ORDER: list[Rule] = []


# ----------------------------------------------------------------------

def add_rule(to, from_, family, func: RuleFunc):
    """
    Register a hand-written conversion rule.  The rule is used to convert
    a quantity of dimension `from_` into dimension `to` when the
    equivalence used belongs to `family`.

    Parameters
    ----------
    to, from_ : str, Dimension or None
        Target and source dimensions.  These can be given as a named
        dimension (e.g. ``'Energy'``), a unit string (e.g. ``'J'``) or a
        ``Dimension``.  ``None`` matches any dimension.
    family : type[Equivalence] or EquivalenceFamily
        Equivalences the rule applies to, e.g. ``MyEquiv`` or
        ``MyEquiv.where(mode='fast')``.
    func : Callable[[Dimension, value, Equivalence], value]
        Called as ``func(to_dim, x, equiv)`` and returns `x` converted to
        a value with the target dimension (any units).

    Raises
    ------
    RegistrationError
        If a rule with the same dimensions and family already exists, or
        any of the arguments are invalid.
    """
    new_rule = Rule(_dim_key(to), _dim_key(from_), as_family(family), func)
    _check_free(new_rule)
    _register(new_rule)


def edconvert(d, x, equiv: Equivalence):
    """
    Convert `x` into a value with dimension `d` using equivalence
    `equiv`.  The result has dimension `d` but is not necessarily in any
    particular units.

    Where more than one rule could apply, the most specific rule is
    used, i.e. the one that is at least as specific as every other
    matching rule in target dimension, source dimension and
    equivalence family.

    Parameters
    ----------
    d : Dimension, str or Dim
        Target dimension (or anything accepted by
        `dimequiv.units.dimension`).
    x : Dim, number or array
        Value to convert.  Plain numbers and arrays are dimensionless.
    equiv : Equivalence
        An equivalence instance.

    Returns
    -------
    result : Dim or number
        Value with dimension `d`.

    Raises
    ------
    CapabilityMismatchError
        If `equiv` is not an `Equivalence` instance.
    NoRelationError
        If no rule applies.
    AmbiguousRelationError
        If several rules apply and none is the most specific.
    """
    check_equivalence(equiv)
    to_dim, from_dim = dimension(d), dimension(x)

    candidates = []
    for key in ((to_dim, from_dim), (to_dim, None), (None, from_dim),
                (None, None)):
        candidates += [r for r in _RULES.get(key, []) if equiv in r.family]

    if not candidates:
        raise NoRelationError(equiv, from_dim, to_dim)

    best = [r for r in candidates
            if all(r.narrower(other) for other in candidates)]
    if len(best) != 1:
        raise AmbiguousRelationError(
            equiv, from_dim, to_dim, candidates=candidates,
            details=f"{len(candidates)} rules match and none is the most "
                    f"specific: " + '; '.join(str(r.family) for r in
                                              candidates))

    return best[0].func(to_dim, x, equiv)


def eqrelation(family, relation: str, k):
    """
    Register a proportional or inversely proportional relation between
    two named dimensions.  Two rules are registered, one in each
    direction:

        - ``'A/B'`` means A / B = `k`, giving A = B·k and B = A / k.
        - ``'A*B'`` means A · B = `k`, giving A = k / B and B = k / A.

    Examples
    --------
    >>> from dimequiv.equivalences import equivalence, uconvert
    >>> from dimequiv.units import dim
    >>> Stretch = equivalence('Stretch')
    >>> eqrelation(Stretch, 'Length/Force', dim(2, 'mm/N'))
    >>> uconvert('mm', dim(3, 'N'), Stretch())
    dim(6, 'mm')

    Parameters
    ----------
    family : type[Equivalence] or EquivalenceFamily
        Equivalences the relation applies to.
    relation : str
        ``'A/B'`` or ``'A*B'``, where `A` and `B` are different named
        dimensions (see `dimequiv.units.named_dimension`).
    k : Dim, number or Callable[[Equivalence], Dim or number]
        The constant.  If callable, it is called with the equivalence
        instance at the time of conversion, allowing the constant to
        depend on the fields of the equivalence.

    Raises
    ------
    RegistrationError
        If `relation` is not of the required form, refers to unknown or
        identical dimensions, `k` has the wrong dimension, or either rule
        is already registered.  Nothing is registered in this case.
    """
    fam = as_family(family)
    match = (_RELATION_RX.fullmatch(relation) if isinstance(relation, str)
             else None)
    if match is None:
        raise RegistrationError(f"Relation must have the form 'A/B' or "
                                f"'A*B', got: {relation!r}",
                                relation=relation)

    a_name, op, b_name = match.groups()
    try:
        a_dim, b_dim = named_dimension(a_name), named_dimension(b_name)
    except KeyError as e:
        raise RegistrationError(e.args[0], relation=relation) from None

    if a_dim == b_dim:
        raise RegistrationError(f"Relation must be between different "
                                f"dimensions, got: {relation!r}",
                                relation=relation)

    rel_dim = a_dim / b_dim if op == '/' else a_dim * b_dim
    if not callable(k) and dimension(k) != rel_dim:
        raise RegistrationError(f"Constant for {relation!r} must have "
                                f"dimension {rel_dim}, got: {dimension(k)}",
                                relation=relation)

    if op == '/':
        to_a, to_b = _mul_by(k), _div_by(k)
    else:
        to_a = to_b = _div_into(k)

    rule_a = Rule(a_dim, b_dim, fam, to_a)
    rule_b = Rule(b_dim, a_dim, fam, to_b)
    _check_free(rule_a)
    _check_free(rule_b)
    _register(rule_a)
    _register(rule_b)


def relations(equiv) -> list[tuple[Optional[Dimension], Optional[Dimension],
                                   EquivalenceFamily]]:
    """
    List the ``(to, from_, family)`` of every registered rule that can
    apply to `equiv`, which is either an `Equivalence` instance or
    subclass, in the order they were registered.  ``None`` dimensions
    match any dimension.
    """
    if isinstance(equiv, Equivalence):
        def applies(fam):
            return equiv in fam
    elif isinstance(equiv, type) and issubclass(equiv, Equivalence):
        def applies(fam):
            return issubclass(equiv, fam.cls) or issubclass(fam.cls, equiv)
    else:
        raise CapabilityMismatchError(f"Expected an Equivalence, got: "
                                      f"{equiv!r}")

    return [r.key() for r in _RULE_ORDER if applies(r.family)]


def rule(to, from_, family):
    """
    Decorator form of `add_rule`, e.g.::

        @rule('Length', 'Time', Ballistic)
        def _(d, x, e):
            return x * e.speed

    The decorated function is returned unchanged.
    """
    def decorator(func: RuleFunc) -> RuleFunc:
        add_rule(to, from_, family, func)
        return func

    return decorator


# ----------------------------------------------------------------------

def check_equivalence(equiv):
    """Raise `CapabilityMismatchError` unless `equiv` is an instance."""
    if isinstance(equiv, Equivalence):
        return

    if isinstance(equiv, type) and issubclass(equiv, Equivalence):
        raise CapabilityMismatchError(
            f"An equivalence instance is required, e.g. "
            f"{equiv.__name__}() instead of {equiv.__name__}.")

    raise CapabilityMismatchError(f"Expected an Equivalence instance, got: "
                                  f"{equiv!r}")


# == Private Attributes & Functions ====================================

_RELATION_RX = re.compile(r'\s*(\w+)\s*([*/])\s*(\w+)\s*')


def _check_free(new_rule: Rule):
    for existing in _RULES.get((new_rule.to, new_rule.from_), []):
        if existing.family == new_rule.family:
            raise RegistrationError(
                f"Rule {new_rule.from_} -> {new_rule.to} already defined "
                f"for {new_rule.family}.")


def _register(new_rule: Rule):
    _RULES.setdefault((new_rule.to, new_rule.from_), []).append(new_rule)
    _RULE_ORDER.append(new_rule)


def _constant(k, equiv):
    return k(equiv) if callable(k) else k


def _dim_key(d) -> Optional[Dimension]:
    """Dimension used as a rule key: names, unit strings or None."""
    if d is None or isinstance(d, Dimension):
        return d
    if not isinstance(d, str):
        raise RegistrationError(f"Expected a dimension, got: {d!r}")

    try:
        return named_dimension(d)
    except KeyError:
        pass

    try:
        return dimension(d)
    except ValueError as e:
        raise RegistrationError(f"'{d}' is neither a dimension name nor a "
                                f"unit string: {e}") from None


def _dim_within(a: Optional[Dimension], b: Optional[Dimension]) -> bool:
    # None is the widest key.
    return b is None or a == b


def _div_by(k):
    def div_by(d, x, e):
        return x / _constant(k, e)
    return div_by


def _div_into(k):
    def div_into(d, x, e):
        return _constant(k, e) / x
    return div_into


def _mul_by(k):
    def mul_by(d, x, e):
        return x * _constant(k, e)
    return mul_by


def _extended_rule(d: Dimension, x, e: ExtendedEquivalence):
    """
    Wildcard rule for `ExtendedEquivalence`: multiply or divide by the
    constant, whichever gives dimension `d`.
    """
    k = e.prop_constant()
    from_dim, k_dim = dimension(x), dimension(k)
    if from_dim * k_dim == d:
        return x * k
    if from_dim / k_dim == d:
        return x / k

    raise NoRelationError(e, from_dim, d,
                          details=f"Constant has dimension {k_dim}.")


add_rule(None, None, ExtendedEquivalence, _extended_rule)
