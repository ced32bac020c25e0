"""Terms comparing two expressions, and predicates that conjoin terms."""

from __future__ import annotations

import sys
from typing import Any, Protocol

from .expressions import Constant, Expression
from .schema import Schema


class PlanInfo(Protocol):
    """Statistics a plan offers for estimating selectivity."""

    def distinct_values(self, field: str) -> int: ...


class EmptySubPredicateError(ValueError):
    """Raised when no term of a predicate applies to the requested schemas."""


class Term:
    """An equality comparison between two expressions."""

    def __init__(self, lhs: Expression, rhs: Expression):
        self.lhs = lhs
        self.rhs = rhs

    def is_satisfied(self, scan: Any) -> bool:
        return self.lhs.evaluate(scan) == self.rhs.evaluate(scan)

    def reduction_factor(self, plan: PlanInfo) -> int:
        """Estimate by how much selecting on this term shrinks the output."""
        lhs_is_field = self.lhs.is_field_name()
        rhs_is_field = self.rhs.is_field_name()
        if lhs_is_field and rhs_is_field:
            return max(
                plan.distinct_values(self.lhs.as_field_name()),
                plan.distinct_values(self.rhs.as_field_name()),
            )
        if lhs_is_field:
            return plan.distinct_values(self.lhs.as_field_name())
        if rhs_is_field:
            return plan.distinct_values(self.rhs.as_field_name())
        if self.lhs.as_constant() == self.rhs.as_constant():
            return 1
        return sys.maxsize

    def find_constant_equivalence(self, field: str) -> Constant | None:
        """Return c if the term has the form ``field=c``, else None."""
        if (
            self.lhs.is_field_name()
            and self.lhs.as_field_name() == field
            and not self.rhs.is_field_name()
        ):
            return self.rhs.as_constant()
        if (
            self.rhs.is_field_name()
            and self.rhs.as_field_name() == field
            and not self.lhs.is_field_name()
        ):
            return self.lhs.as_constant()
        return None

    def find_field_equivalence(self, field: str) -> str | None:
        """Return F2 if the term has the form ``field=F2``, else None."""
        if (
            self.lhs.is_field_name()
            and self.lhs.as_field_name() == field
            and self.rhs.is_field_name()
        ):
            return self.rhs.as_field_name()
        if (
            self.rhs.is_field_name()
            and self.rhs.as_field_name() == field
            and self.lhs.is_field_name()
        ):
            return self.lhs.as_field_name()
        return None

    def can_apply(self, schema: Schema) -> bool:
        return self.lhs.can_apply(schema) and self.rhs.can_apply(schema)

    def __str__(self) -> str:
        return f"{self.lhs}={self.rhs}"

    def __repr__(self) -> str:
        return f"Term({self.lhs!r}, {self.rhs!r})"


class Predicate:
    """A conjunction of terms; with no terms it is always true."""

    def __init__(self, *args: Term):
        self.terms: list[Term] = list(args)

    def conjoin_with(self, other: Predicate) -> None:
        """Add the other predicate's terms to this one."""
        self.terms.extend(other.terms)

    def is_satisfied(self, scan: Any) -> bool:
        return all(term.is_satisfied(scan) for term in self.terms)

    def reduction_factor(self, plan: PlanInfo) -> int:
        factor = 1
        for term in self.terms:
            factor *= term.reduction_factor(plan)
        return factor

    def select_sub_pred(self, schema: Schema) -> Predicate:
        """Return the terms that apply to the schema."""
        result = Predicate(*(t for t in self.terms if t.can_apply(schema)))
        if not result.terms:
            raise EmptySubPredicateError("query: no terms in select subpredicate")
        return result

    def join_sub_pred(self, schema1: Schema, schema2: Schema) -> Predicate:
        """Return the terms that apply to the union of both schemas but to neither alone."""
        joined = Schema()
        joined.add_all(schema1)
        joined.add_all(schema2)
        result = Predicate(
            *(
                t
                for t in self.terms
                if not t.can_apply(schema1)
                and not t.can_apply(schema2)
                and t.can_apply(joined)
            )
        )
        if not result.terms:
            raise EmptySubPredicateError("query: no terms in join subpredicate")
        return result

    def find_constant_equivalence(self, field: str) -> Constant | None:
        for term in self.terms:
            found = term.find_constant_equivalence(field)
            if found is not None:
                return found
        return None

    def find_field_equivalence(self, field: str) -> str | None:
        for term in self.terms:
            found = term.find_field_equivalence(field)
            if found is not None:
                return found
        return None

    def __str__(self) -> str:
        return " and ".join(str(term) for term in self.terms)